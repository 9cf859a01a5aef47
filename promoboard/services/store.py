"""
Accès au stockage des enregistrements
Lecture par id et commit avec conversion des erreurs SQLAlchemy
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from promoboard import db
from promoboard.utils.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)


def get_or_404(model, record_id, label: str = None):
    """
    Charge un enregistrement par id

    Raises:
        NotFoundError: id inconnu ou mal formé
        StoreError: base injoignable
    """
    label = label or model.__name__
    if not record_id or not isinstance(record_id, str) or len(record_id) > 36:
        raise NotFoundError(f'{label} not found')
    try:
        record = db.session.get(model, record_id)
    except SQLAlchemyError as e:
        logger.error(f"Lecture {label} {record_id} impossible: {e}")
        raise StoreError('Database error')
    if record is None:
        raise NotFoundError(f'{label} not found')
    return record


def fetch_all(query) -> list:
    try:
        return query.all()
    except SQLAlchemyError as e:
        logger.error(f"Requête impossible: {e}")
        raise StoreError('Database error')


def commit(action: str):
    """Valide la transaction; rollback puis StoreError en cas d'échec"""
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Echec base ({action}): {e}")
        raise StoreError('Database error')
