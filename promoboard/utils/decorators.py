from functools import wraps
from flask import request, current_app
from flask_jwt_extended import verify_jwt_in_request, get_jwt
from promoboard.utils.errors import AuthError, ForbiddenError
import logging

logger = logging.getLogger(__name__)


def admin_required(fn):
    """
    Décorateur pour les routes admin uniquement

    - Pas de header Bearer -> 401
    - Token invalide, expiré ou sans le rôle ADMIN -> 403
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        # Skip JWT verification for OPTIONS (CORS preflight)
        if request.method == 'OPTIONS':
            return fn(*args, **kwargs)

        authorization = request.headers.get('Authorization', '')
        if not authorization.startswith('Bearer ') or not authorization[7:].strip():
            raise AuthError('Unauthorized')

        try:
            verify_jwt_in_request()
        except Exception as e:
            logger.warning(f"JWT verification failed: {e}")
            raise ForbiddenError('Forbidden')

        claims = get_jwt()
        if claims.get('role') != current_app.config['ADMIN_ROLE']:
            logger.warning(f"Token sans rôle admin: {claims.get('role')}")
            raise ForbiddenError('Forbidden')

        return fn(*args, **kwargs)

    return wrapper
