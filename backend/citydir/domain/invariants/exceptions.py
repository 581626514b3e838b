from citydir.errors import DirectoryError


class InvariantViolation(DirectoryError):
    status_code = 400
    kind = "InvariantViolation"
