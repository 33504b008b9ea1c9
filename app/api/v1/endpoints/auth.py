"""
Auth Endpoints - Atlas SSO login/logout and employee linking
"""
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.identity_service import IdentityService
from app.services.user_service import UserService
from app.schemas import User, LoginRequest, CurrentIdentity, DataResponse
from app.api.deps import require_auth
from app.core.config import settings
from atams.encryption import encrypt_response_data

router = APIRouter()
identity_service = IdentityService()
user_service = UserService()


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(credentials: LoginRequest):
    """
    Sign in through Atlas SSO

    **Response:**
    - Atlas token payload (access/refresh tokens)

    **Errors:**
    - 401: Invalid credentials
    - 503: Atlas unreachable
    """
    tokens = await identity_service.login(credentials.username, credentials.password)

    return DataResponse(
        success=True,
        message="Login successful",
        data=tokens
    )


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(request: Request):
    """Revoke the Atlas session of the bearer token or ATLASTOKEN cookie"""
    access_token = request.cookies.get("ATLASTOKEN")
    if not access_token:
        scheme, _, token = request.headers.get("Authorization", "").partition(" ")
        if scheme.lower() == "bearer":
            access_token = token.strip()

    await identity_service.logout(access_token)

    return DataResponse(success=True, message="Logout successful")


@router.get("/me", status_code=status.HTTP_200_OK)
async def me(
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_auth)
):
    """
    Signed-in identity and the employee record linked to it

    **Response:**
    - identity: Atlas user info
    - employee: linked employee, or null if not yet synced
    """
    employee = user_service.find_by_email(db, current_user.get("email"))

    response = DataResponse(
        success=True,
        message="Identity retrieved successfully",
        data=CurrentIdentity(identity=current_user, employee=employee)
    )
    return encrypt_response_data(response, settings)


@router.post(
    "/sync",
    response_model=DataResponse[User],
    status_code=status.HTTP_201_CREATED
)
async def sync(
    response: Response,
    db: Session = Depends(get_db),
    current_user: dict = Depends(require_auth)
):
    """
    Create the local employee for the signed-in identity if missing

    The very first employee synced becomes admin.

    **Response:**
    - 201 when the employee was created, 200 when it already existed
    """
    user, created = user_service.sync_identity(db, current_user)
    if not created:
        response.status_code = status.HTTP_200_OK

    return DataResponse(
        success=True,
        message="Employee created" if created else "Employee already linked",
        data=user
    )
