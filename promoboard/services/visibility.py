"""
Règles de visibilité publique
=============================

Décide si une promotion ou une annonce est "en ligne" à un instant donné,
et expose les mêmes règles sous forme de requêtes SQLAlchemy.

Promotion visible  <=> status == APPROVED et end >= minuit(aujourd'hui)
Annonce visible    <=> is_active et start_date <= maintenant et end_date >= minuit(aujourd'hui)

La date de début d'une promotion n'est volontairement pas vérifiée: une
promotion approuvée est publiée immédiatement, même si son `start` est
dans le futur. Les annonces, elles, respectent les deux bornes.
"""

from datetime import datetime

from promoboard.models import Announcement, Promotion, PromotionStatus
from promoboard.utils.helpers import utcnow

# Aucune garde: l'admin peut passer de n'importe quel statut à n'importe quel autre
STATUS_TRANSITIONS = {
    status.value: {s.value for s in PromotionStatus}
    for status in PromotionStatus
}


def midnight(now: datetime = None) -> datetime:
    """Début du jour de `now` (00:00:00)"""
    now = now or utcnow()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def is_promotion_visible(promotion, now: datetime = None) -> bool:
    now = now or utcnow()
    if promotion.status != PromotionStatus.APPROVED.value:
        return False
    if promotion.end is None:
        return False
    return promotion.end >= midnight(now).date()


def is_announcement_visible(announcement, now: datetime = None) -> bool:
    now = now or utcnow()
    if not announcement.is_active:
        return False
    if announcement.start_date is None or announcement.end_date is None:
        return False
    return announcement.start_date <= now and announcement.end_date >= midnight(now)


def visible_promotions_query(now: datetime = None):
    """Promotions publiques, dans l'ordre d'insertion"""
    today = midnight(now).date()
    return Promotion.query.filter(
        Promotion.status == PromotionStatus.APPROVED.value,
        Promotion.end >= today
    ).order_by(Promotion.created_at.asc())


def visible_announcements_query(now: datetime = None):
    """Annonces publiques, les plus récentes d'abord"""
    now = now or utcnow()
    return Announcement.query.filter(
        Announcement.is_active.is_(True),
        Announcement.start_date <= now,
        Announcement.end_date >= midnight(now)
    ).order_by(Announcement.created_at.desc())


def all_promotions_query():
    """Vue "boîte de réception" admin: tous statuts, toutes dates"""
    return Promotion.query.order_by(Promotion.created_at.desc())


def all_announcements_query():
    return Announcement.query.order_by(Announcement.created_at.desc())


def can_transition(current: str, target: str) -> bool:
    return target in STATUS_TRANSITIONS.get(current, set())


def apply_status(promotion, status: str):
    """
    Applique un statut de modération

    Les champs de contenu ne sont pas touchés.

    Raises:
        ValueError: statut inconnu
    """
    if not PromotionStatus.is_valid(status):
        raise ValueError(f"Unknown promotion status: {status}")
    if not can_transition(promotion.status, status):
        raise ValueError(f"Transition {promotion.status} -> {status} not allowed")
    promotion.status = status
    return promotion
