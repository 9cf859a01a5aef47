"""
Services de l'application
Logique métier réutilisable
"""

from flask import current_app

from promoboard.services.announcement_service import AnnouncementService
from promoboard.services.cache_service import PromotionCache
from promoboard.services.image_service import ImageRelay, UploadResult
from promoboard.services.promotion_service import PromotionService


def get_promotion_service() -> PromotionService:
    """Service construit avec les clients injectés dans l'application courante"""
    return PromotionService(
        current_app.extensions['promotion_cache'],
        current_app.extensions['image_relay'],
        default_color=current_app.config['DEFAULT_PROMOTION_COLOR']
    )


def get_announcement_service() -> AnnouncementService:
    return AnnouncementService(current_app.extensions['image_relay'])


__all__ = [
    'AnnouncementService',
    'PromotionCache',
    'ImageRelay',
    'UploadResult',
    'PromotionService',
    'get_promotion_service',
    'get_announcement_service'
]
