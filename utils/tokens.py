import datetime
from flask import current_app
import jwt
from utils.logging_utils import get_logger

logger = get_logger(__name__)

ALGORITHM = "HS256"

def get_jwt_token(user_data, expires_in=None):
    """Generate JWT token with user payload"""
    if not user_data:
        raise ValueError("User data must be provided to generate JWT token")

    if expires_in is None:
        expires_in = datetime.timedelta(hours=current_app.config.get("JWT_EXPIRY_HOURS", 24))

    expiration = datetime.datetime.now(datetime.timezone.utc) + expires_in
    payload = {"exp": expiration, **user_data}

    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm=ALGORITHM)

def decode_jwt(token):
    """Decode and validate a JWT token. Returns the payload, or None if it is expired or invalid."""
    try:
        return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Token expired")
        return None
    except jwt.InvalidTokenError:
        logger.info("Invalid token provided")
        return None
