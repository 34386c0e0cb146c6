"""
Account endpoints.

* ``POST /register`` creates a regular account (when registration is
  enabled) and logs it in.
* ``POST /login`` exchanges a username and password for a bearer token.
* ``GET /user`` returns the account behind the presented token.
* ``GET /users/{id}`` returns an account's public profile, used by the
  blog to show post authors.

Tokens are stateless, so there is no logout route: clients simply drop
the token.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from club_site_api.app.core.config import Settings
from club_site_api.app.core.security import issue_user_token, require_user
from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.dependencies import get_app_settings, get_storage
from club_site_api.app.schemas.user import TokenResponse, User, UserCreate, UserCredentials, UserRead
from club_site_api.app.services.user_service import UserService

router = APIRouter()


def _token_response(user: User, settings: Settings) -> TokenResponse:
    return TokenResponse(
        access_token=issue_user_token(user, settings),
        user=UserRead.model_validate(user),
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_in: UserCreate,
    storage: ClubStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    """Register a new non-admin account and return a token for it."""
    if not settings.allow_registration:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Registration is disabled")
    try:
        user = await UserService.register(storage, user_in)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _token_response(user, settings)


@router.post("/login", response_model=TokenResponse)
async def login_user(
    credentials: UserCredentials,
    storage: ClubStorage = Depends(get_storage),
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    user = await UserService.authenticate(storage, credentials.username, credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return _token_response(user, settings)


@router.get("/user", response_model=UserRead)
async def read_current_user(current_user: User = Depends(require_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.get("/users/{user_id}", response_model=UserRead)
async def read_user_profile(user_id: int, storage: ClubStorage = Depends(get_storage)) -> UserRead:
    user = storage.users.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(user)
