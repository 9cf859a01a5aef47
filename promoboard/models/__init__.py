"""
Modèles de l'application
Export centralisé des modèles SQLAlchemy
"""

from promoboard.models.enums import PromotionStatus
from promoboard.models.promotion import Promotion
from promoboard.models.announcement import Announcement

__all__ = [
    'PromotionStatus',
    'Promotion',
    'Announcement'
]
