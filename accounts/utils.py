import logging
from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = 'HS256'


def token_claims(user, issued_at=None):
    """Claims carried by a dashboard session token."""
    issued_at = issued_at or datetime.now(timezone.utc)
    return {
        'user_id': str(user.id),
        'email': user.email,
        'role': user.effective_role,
        'location_id': str(user.location_id) if user.location_id else None,
        'iat': issued_at,
        'exp': issued_at + timedelta(days=settings.JWT_EXPIRY_DAYS),
    }


def create_jwt_token(user):
    return jwt.encode(token_claims(user), settings.SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_jwt_token(token):
    """Decode a session token, or return None when it is expired or malformed."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired session token")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected invalid session token: {e}")
    return None
