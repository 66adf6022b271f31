"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="User")
class UserRegistered:
    """A new account was created, either by sign-up or by admin seeding."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    username: String(required=True)
    is_admin: Boolean(default=False)
    registered_at: DateTime(required=True)
