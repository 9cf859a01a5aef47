"""
Service Promotions
==================

Soumission, modération et publication des promotions.
Toute écriture admin invalide le cache de la liste publique après commit.
"""

import logging

from promoboard import db
from promoboard.models import Promotion, PromotionStatus
from promoboard.services import store
from promoboard.services.visibility import (
    all_promotions_query, apply_status, visible_promotions_query
)

logger = logging.getLogger(__name__)


class PromotionService:
    """
    Usage:
        service = PromotionService(cache, image_relay, default_color='#4F46E5')
        payload = service.list_visible()
    """

    def __init__(self, cache, image_relay, default_color: str = '#4F46E5'):
        self.cache = cache
        self.image_relay = image_relay
        self.default_color = default_color

    # ==================== LECTURES ====================

    def list_visible(self, now=None) -> str:
        """Liste publique sérialisée en JSON (via le cache)"""
        return self.cache.get_or_compute(
            lambda: [p.to_dict() for p in store.fetch_all(visible_promotions_query(now))]
        )

    def list_all(self) -> list:
        return store.fetch_all(all_promotions_query())

    def get(self, promotion_id: str) -> Promotion:
        return store.get_or_404(Promotion, promotion_id, 'Promotion')

    # ==================== ECRITURES ====================

    def submit(self, data, images=None) -> Promotion:
        """Soumission publique: statut PENDING, la liste publique ne change pas"""
        promotion = self._build(data, images, PromotionStatus.PENDING.value)
        store.commit('submit promotion')
        logger.info(f"Promotion soumise: {promotion.id}")
        return promotion

    def create_approved(self, data, images=None) -> Promotion:
        """Création admin: approuvée d'office"""
        promotion = self._build(data, images, PromotionStatus.APPROVED.value)
        store.commit('create promotion')
        self.cache.invalidate()
        logger.info(f"Promotion créée par l'admin: {promotion.id}")
        return promotion

    def update_status(self, promotion_id: str, status: str) -> Promotion:
        promotion = self.get(promotion_id)
        previous = promotion.status
        apply_status(promotion, status)
        store.commit('update promotion status')
        self.cache.invalidate()
        logger.info(f"Promotion {promotion.id}: {previous} -> {status}")
        return promotion

    def edit(self, promotion_id: str, changes, images=None) -> Promotion:
        """
        Modifie le contenu sans toucher au statut

        De nouvelles images remplacent la liste existante.
        """
        promotion = self.get(promotion_id)
        image_urls = self.image_relay.upload_all(images) if images else None

        for name, value in changes.changes().items():
            setattr(promotion, name, value)
        if image_urls:
            promotion.image_urls = image_urls

        store.commit('edit promotion')
        self.cache.invalidate()
        logger.info(f"Promotion modifiée: {promotion.id}")
        return promotion

    def delete(self, promotion_id: str):
        promotion = self.get(promotion_id)
        db.session.delete(promotion)
        store.commit('delete promotion')
        self.cache.invalidate()
        logger.info(f"Promotion supprimée: {promotion_id}")

    def _build(self, data, images, status: str) -> Promotion:
        # Upload avant toute écriture: un échec annule la création
        image_urls = self.image_relay.upload_all(images) if images else []

        promotion = Promotion(
            title=data.title,
            description=data.description,
            start=data.start,
            end=data.end,
            color=data.color or self.default_color,
            image_urls=image_urls,
            status=status
        )
        db.session.add(promotion)
        return promotion
