"""Login endpoint.

POST /api/login - check credentials, set the session cookie
"""

from fastapi import APIRouter, Response

from isupipe.schemas import LoginRequest, LoginResponse
from isupipe.services.auth import login as login_user
from isupipe.settings import get_settings

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, response: Response) -> LoginResponse:
    session_id, user_id = await login_user(request.username, request.password)

    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        path="/",
    )
    return LoginResponse(ok=True, user_id=user_id)
