"""User aggregate: storefront accounts and their credentials.

Passwords are never stored in clear: the aggregate keeps a passlib hash and
verifies candidates against it. Admin accounts are ordinary users with the
``is_admin`` flag set; only admins may manage orders.
"""

from datetime import UTC, datetime

from passlib.context import CryptContext
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String

from identity.domain import identity

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], default="pbkdf2_sha256", deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


@identity.aggregate
class User:
    username: String(required=True, max_length=100, unique=True)
    password_hash: String(required=True, max_length=255)
    is_admin: Boolean(default=False)
    registered_at: DateTime()

    @classmethod
    def register(cls, username, password, is_admin=False):
        from identity.user.events import UserRegistered

        username = (username or "").strip()
        if not username or not password:
            raise ValidationError({"username": ["Username and password are required"]})

        now = datetime.now(UTC)
        user = cls(
            username=username,
            password_hash=hash_password(password),
            is_admin=bool(is_admin),
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                username=username,
                is_admin=user.is_admin,
                registered_at=now,
            )
        )
        return user

    def verify_password(self, password) -> bool:
        if not password or not self.password_hash:
            return False
        try:
            return pwd_context.verify(password, self.password_hash)
        except ValueError:
            # Hash in an unrecognised format
            return False


@identity.repository(part_of=User)
class UserRepository:
    def find_by_username(self, username: str) -> User | None:
        return self._dao.query.filter(username=username).all().first
