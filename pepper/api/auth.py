"""Bearer-token verification for the API.

Tokens are HS256 JWTs carrying userId / email / name claims. Issuing them
(signup, login) belongs to the account service; create_token is kept for
tooling and tests.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pepper.domain.User import User
from pepper.utilities.config import JWT_ALGORITHM, JWT_EXPIRES_DAYS, JWT_SECRET

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def create_token(user: User, expires_in: Optional[timedelta] = None) -> str:
    payload = user.to_claims()
    payload["exp"] = datetime.now(timezone.utc) + (expires_in or timedelta(days=JWT_EXPIRES_DAYS))
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def verify_token(token: str) -> Optional[User]:
    """Return the User for a valid token, None for an expired or invalid one."""
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Auth failed: token expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.info("Auth failed: invalid token: %s", e)
        return None
    return User.from_claims(payload)


def get_current_user(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> User:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=401, detail="Unauthorized")
    user = verify_token(credentials.credentials)
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
