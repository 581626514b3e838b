from typing import Set

from citydir.errors import ValidationError

EVENT_STATUSES: Set[str] = {"draft", "published", "archived"}


def assert_event_status(status: str) -> None:
    """
    Guards the status column of events and sub-events.
    """
    if status not in EVENT_STATUSES:
        raise ValidationError(
            f"Invalid status '{status}', expected one of: {', '.join(sorted(EVENT_STATUSES))}"
        )
