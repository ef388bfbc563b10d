from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ballotbox.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY

bearer_scheme = HTTPBearer(auto_error=False)


def normalize_identity(identity: str) -> str:
    # Wallet addresses are compared case-insensitively
    return (identity or "").strip().lower()


# Create JWT access token for a caller identity
def create_access_token(identity: str, expires_delta: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    subject = normalize_identity(identity)
    if not subject:
        raise ValueError("identity must not be empty")
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_delta)
    to_encode = {"sub": subject, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


# Decode a token and return the identity it carries
def decode_access_token(token: str) -> str:
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    subject = normalize_identity(payload.get("sub"))
    if not subject:
        raise JWTError("token has no subject")
    return subject


def get_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """FastAPI dependency resolving the authenticated caller identity."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise credentials_exception
    try:
        return decode_access_token(credentials.credentials)
    except JWTError:
        raise credentials_exception
