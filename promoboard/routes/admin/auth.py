"""
Routes Admin - Authentification
Identifiant unique partagé, token JWT signé avec le rôle ADMIN
"""

from flask import current_app, jsonify
from flask_jwt_extended import create_access_token
from promoboard import limiter
from promoboard.routes.admin import admin_bp
from promoboard.schemas import LoginInput
from promoboard.utils.errors import AuthError
from promoboard.utils.helpers import get_request_data
import hmac
import logging

logger = logging.getLogger(__name__)


@admin_bp.route('/login', methods=['POST'])
@limiter.limit("5 per minute")
def admin_login():
    """
    Connexion administrateur

    Body:
        - password: Mot de passe admin

    Returns:
        {"token": "<jwt>"} valable ADMIN_TOKEN_HOURS heures
    """
    data = LoginInput.from_data(get_request_data())
    expected = current_app.config.get('ADMIN_PASSWORD')

    if not expected or not hmac.compare_digest(data.password.encode(), expected.encode()):
        logger.warning("Admin login failed")
        raise AuthError('Invalid Password')

    token = create_access_token(
        identity='admin',
        additional_claims={'role': current_app.config['ADMIN_ROLE']}
    )

    logger.info("Admin login")

    return jsonify({'token': token})
