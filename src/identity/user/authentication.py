"""Credential checks and admin bootstrap."""

from protean.utils.globals import current_domain

from identity.domain import logger
from identity.user.registration import RegisterUser
from identity.user.user import User


def authenticate(username: str, password: str) -> User | None:
    """Return the user when the credentials match, else None."""
    user = current_domain.repository_for(User).find_by_username((username or "").strip())
    if user is None or not user.verify_password(password):
        logger.info("login_failed", username=username)
        return None
    return user


def seed_admin(username: str, password: str) -> str:
    """Ensure an admin account exists; returns its id. Safe to call repeatedly."""
    existing = current_domain.repository_for(User).find_by_username(username)
    if existing is not None:
        logger.debug("admin_already_seeded", username=username)
        return str(existing.id)

    user_id = current_domain.process(
        RegisterUser(username=username, password=password, is_admin=True),
        asynchronous=False,
    )
    logger.info("admin_seeded", username=username)
    return user_id
