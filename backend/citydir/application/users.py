from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy import or_

from citydir.extensions import db
from citydir.errors import InvalidCredentialsError, ValidationError
from citydir.models import User
from citydir.normalizers.user import normalize_user
from citydir.utils.transaction import transactional
from citydir.application.common import get_or_404

MIN_PASSWORD_LENGTH = 8


def register_user(
    username: str,
    email: str,
    password: str,
    role: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a CMS operator. Only a salted hash of the password is stored.

    Duplicate usernames and emails surface as distinct ConflictErrors.
    """
    fields = (("username", username), ("email", email), ("password", password), ("role", role))
    for field, value in fields:
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"'{field}' must be a string")

    username = (username or "").strip()
    email = (email or "").strip().lower()

    if not username or not email or not password:
        raise ValidationError("Username, email and password are required")
    if "@" not in email:
        raise ValidationError("Invalid email address")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    user = User()
    user.username = username
    user.email = email
    user.role = role or current_app.config.get("DEFAULT_USER_ROLE", "editor")
    user.set_password(password)

    with transactional(unique_fields=("username", "email")):
        db.session.add(user)
        db.session.flush()

    current_app.logger.info("user.register id=%s username=%s", user.id, user.username)
    return normalize_user(user)


def login_user(username_or_email: str, password: str) -> Dict[str, Any]:
    """
    Return the user matching the credentials, without its password hash.

    An unknown identifier and a wrong password raise the same error.
    """
    if not isinstance(username_or_email, str) or not isinstance(password, str):
        raise InvalidCredentialsError()

    identifier = (username_or_email or "").strip()
    if not identifier or not password:
        raise InvalidCredentialsError()

    user = User.query.filter(
        or_(User.username == identifier, User.email == identifier.lower())
    ).first()

    if not user or not user.check_password(password):
        current_app.logger.info("user.login failed")
        raise InvalidCredentialsError()

    return normalize_user(user)


def get_user(user_id) -> Dict[str, Any]:
    return normalize_user(get_or_404(User, user_id, "User"))


def list_users() -> List[Dict[str, Any]]:
    return [normalize_user(u) for u in User.query.order_by(User.created_at.desc()).all()]


def count_users() -> int:
    return User.query.count()
