"""JWT authentication and role checks for marketplace actors."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from marketplace.core.config import settings
from marketplace.core.exceptions import forbidden, unauthorized

security_scheme = HTTPBearer(auto_error=False)

ROLES = ("client", "freelancer", "agent", "admin", "superadmin")
ADMIN_ROLES = ("admin", "superadmin")


@dataclass(frozen=True)
class Actor:
    """The authenticated user behind a request."""

    id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role in ADMIN_ROLES

    @property
    def is_agent(self) -> bool:
        return self.role == "agent"


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRY_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> Actor:
    """Resolve the acting user from the Bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_token(credentials.credentials)
    user_id = payload.get("sub")
    role = payload.get("role")
    if user_id is None or role not in ROLES:
        raise unauthorized("Invalid token payload")
    return Actor(id=str(user_id), role=role)


async def require_admin(actor: Actor = Depends(get_current_user)) -> Actor:
    """Allow only admin and superadmin actors through."""
    if not actor.is_admin:
        raise forbidden(f"Role '{actor.role}' insufficient. Admin access required.")
    return actor
