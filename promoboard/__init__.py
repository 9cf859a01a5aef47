"""
Application Flask - Promoboard Backend
API REST de gestion des promotions et des annonces
"""

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from werkzeug.exceptions import HTTPException
from config import config
import logging
import os

db = SQLAlchemy()
jwt = JWTManager()
migrate = Migrate()
limiter = Limiter(key_func=get_remote_address)

# Configuration logging
logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    400: 'BAD_REQUEST',
    401: 'UNAUTHORIZED',
    403: 'FORBIDDEN',
    404: 'NOT_FOUND',
    405: 'METHOD_NOT_ALLOWED',
    413: 'PAYLOAD_TOO_LARGE',
    429: 'RATE_LIMITED',
}


def create_app(config_name='default', cache=None, image_relay=None):
    """
    Factory function pour créer l'application Flask

    Args:
        config_name: Nom de la configuration (development, production, testing)
        cache: PromotionCache à utiliser (construit depuis REDIS_URL sinon)
        image_relay: ImageRelay à utiliser (construit depuis CLOUDINARY_* sinon)

    Returns:
        Flask app configurée
    """
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    logging.getLogger().setLevel(app.config.get('LOG_LEVEL', 'INFO').upper())

    # Vérifications de sécurité en production
    if config_name == 'production':
        config[config_name].init_app(app)

    # Initialisation des extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=app.config['MIGRATIONS_DIR'])
    jwt.init_app(app)
    limiter.init_app(app)

    CORS(app, resources={
        r"/api/*": {
            "origins": app.config.get('CORS_ORIGINS', ['http://localhost:3000']),
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": app.config.get('CORS_ALLOW_HEADERS', ["Content-Type", "Authorization"]),
        }
    })

    # Clients externes: construits une fois, injectés dans les services
    from promoboard.services.cache_service import PromotionCache
    from promoboard.services.image_service import ImageRelay

    if cache is None:
        cache = PromotionCache.from_url(
            app.config.get('REDIS_URL'),
            key=app.config['PROMOTIONS_CACHE_KEY'],
            ttl=app.config['PROMOTIONS_CACHE_TTL'],
            socket_timeout=app.config['CACHE_SOCKET_TIMEOUT'],
        )
    if image_relay is None:
        image_relay = ImageRelay.from_config(app.config)

    app.extensions['promotion_cache'] = cache
    app.extensions['image_relay'] = image_relay

    # Headers de sécurité
    @app.after_request
    def add_security_headers(response):
        if config_name == 'production':
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        return response

    # ==================== BLUEPRINTS ====================

    # Routes publiques (site vitrine)
    from promoboard.routes.public import public_bp
    app.register_blueprint(public_bp, url_prefix='/api')

    # Routes admin (modération)
    from promoboard.routes.admin import admin_bp
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

    # ==================== ERROR HANDLERS ====================

    from promoboard.utils.errors import ApiError

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        return error.to_dict(), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        code = HTTP_ERROR_CODES.get(error.code, 'HTTP_ERROR')
        return {'error': error.description, 'code': code}, error.code

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Erreur interne: {str(error)}")
        return {'error': 'Internal server error', 'code': 'INTERNAL_ERROR'}, 500

    # ==================== HEALTH CHECK ====================

    @app.route('/api/health')
    def health_check():
        """Endpoint de vérification de santé"""
        try:
            db.session.execute(db.text('SELECT 1'))
            db_status = 'connected'
        except Exception as e:
            logger.error(f"Health check database error: {e}")
            db_status = 'error'

        return {
            'status': 'healthy',
            'database': db_status,
            'cache': 'enabled' if cache.enabled else 'disabled',
            'version': '1.0.0'
        }

    # Créer les tables de la base de données (dev uniquement)
    if os.environ.get('AUTO_CREATE_DB', 'false').lower() == 'true':
        with app.app_context():
            db.create_all()

    logger.info(f"Application démarrée en mode {config_name}")

    return app


def shutdown_app(app):
    """
    Libère les connexions longues (cache, pool SQL)

    A appeler une fois à l'arrêt du process.
    """
    cache = app.extensions.get('promotion_cache')
    if cache is not None:
        cache.close()

    with app.app_context():
        db.engine.dispose()

    logger.info("Connexions fermées")
