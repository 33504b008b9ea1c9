"""
Auth Schemas - Login proxying and identity lookups
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel

from app.schemas.common import CamelModel
from app.schemas.user import User


class LoginRequest(BaseModel):
    username: str
    password: str


class CurrentIdentity(CamelModel):
    """Signed-in identity with the employee record it is linked to"""
    identity: Dict[str, Any]
    employee: Optional[User] = None
