"""Session-backed authentication dependencies for FastAPI routes.

The signed session cookie carries a small user snapshot so that other
bounded contexts can authorize requests without reading the identity store.
"""

from fastapi import HTTPException, Request
from pydantic import BaseModel

SESSION_USER_KEY = "user"


class SessionUser(BaseModel):
    id: str
    username: str
    is_admin: bool = False


def login_session(request: Request, user) -> SessionUser:
    session_user = SessionUser(id=str(user.id), username=user.username, is_admin=bool(user.is_admin))
    request.session[SESSION_USER_KEY] = session_user.model_dump()
    return session_user


def logout_session(request: Request) -> None:
    request.session.clear()


def current_user(request: Request) -> SessionUser | None:
    data = request.session.get(SESSION_USER_KEY)
    if not data:
        return None
    return SessionUser.model_validate(data)


def require_user(request: Request) -> SessionUser:
    user = current_user(request)
    if user is None:
        raise HTTPException(status_code=401, detail="You must be logged in")
    return user


def require_admin(request: Request) -> SessionUser:
    user = current_user(request)
    if user is None or not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
