"""
Deploy migration script
=======================
Runs database migrations on deploy (`flask db upgrade` on the shipped
`migrations/` tree). Falls back to `db.create_all()` only when the
migrations directory is missing from the deployed image.
"""
import os
import logging

from flask_migrate import upgrade

logger = logging.getLogger(__name__)


def run_migrations(app):
    """Applique les migrations; une erreur de migration fait échouer le déploiement"""
    from promoboard import db

    with app.app_context():
        if os.path.isdir(app.config['MIGRATIONS_DIR']):
            upgrade(directory=app.config['MIGRATIONS_DIR'])
            logger.info("[MIGRATE] Flask-Migrate upgrade completed successfully.")
        else:
            logger.warning(f"[MIGRATE] {app.config['MIGRATIONS_DIR']} not found, using db.create_all()...")
            db.create_all()
            logger.info("[MIGRATE] db.create_all() completed successfully.")


def main():
    os.environ.setdefault('FLASK_ENV', 'production')

    from promoboard import create_app, shutdown_app
    app = create_app(os.environ['FLASK_ENV'])
    try:
        run_migrations(app)
    finally:
        shutdown_app(app)


if __name__ == '__main__':
    main()
