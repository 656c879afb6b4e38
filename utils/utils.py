from functools import wraps
from flask import request, jsonify, g
from utils.tokens import decode_jwt
from utils.logging_utils import get_logger

logger = get_logger(__name__)

def _get_request_token():
    token = request.cookies.get("access_token")
    if token:
        return token

    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):].strip()
    return None

def login_required(f):
    """Decode the caller's JWT into `g.user`, or answer 401."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = _get_request_token()
        if not token:
            logger.debug("No access token found in request")
            return jsonify({"error": "Unauthorized"}), 401

        decoded = decode_jwt(token)
        if not decoded or decoded.get("user_id") is None:
            return jsonify({"error": "Invalid token"}), 401

        g.user = decoded
        return f(*args, **kwargs)

    return decorated_function
