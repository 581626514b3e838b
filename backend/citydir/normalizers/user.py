from .relations import iso


def normalize_user(user):
    """The password hash never leaves the data-access layer."""
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "created_at": iso(user.created_at),
    }
