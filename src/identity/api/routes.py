"""FastAPI routes for registration, login and the session user."""

from fastapi import APIRouter, HTTPException, Request
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.api.dependencies import current_user, login_session, logout_session
from identity.api.schemas import LoginRequest, RegisterRequest, StatusResponse, UserResponse
from identity.user.authentication import authenticate
from identity.user.registration import RegisterUser
from identity.user.user import User

router = APIRouter(prefix="/api", tags=["auth"])


def _user_response(user) -> UserResponse:
    return UserResponse(id=str(user.id), username=user.username, is_admin=bool(user.is_admin))


@router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: RegisterRequest, request: Request) -> UserResponse:
    command = RegisterUser(username=body.username, password=body.password)
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    login_session(request, user)
    return _user_response(user)


@router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, request: Request) -> UserResponse:
    user = authenticate(body.username, body.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    login_session(request, user)
    return _user_response(user)


@router.post("/logout", response_model=StatusResponse)
async def logout(request: Request) -> StatusResponse:
    logout_session(request)
    return StatusResponse()


@router.get("/user", response_model=UserResponse)
async def get_user(request: Request) -> UserResponse:
    session_user = current_user(request)
    if session_user is None:
        raise HTTPException(status_code=401, detail="You must be logged in")
    try:
        user = current_domain.repository_for(User).get(session_user.id)
    except ObjectNotFoundError:
        # Account no longer exists; drop the stale session
        logout_session(request)
        raise HTTPException(status_code=401, detail="You must be logged in") from None
    return _user_response(user)
