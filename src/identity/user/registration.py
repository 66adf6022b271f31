"""User registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from identity.domain import identity, logger
from identity.user.user import User


@identity.command(part_of="User")
class RegisterUser:
    """Create a new account with a username and password."""

    username: String(required=True, max_length=100)
    password: String(required=True, max_length=255)
    is_admin: Boolean(default=False)


@identity.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_username(command.username.strip()) is not None:
            raise ValidationError({"username": ["Username already exists"]})

        user = User.register(
            username=command.username,
            password=command.password,
            is_admin=command.is_admin,
        )
        repo.add(user)
        logger.info("user_registered", user_id=str(user.id), is_admin=user.is_admin)
        return str(user.id)
