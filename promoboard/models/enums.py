"""
Enums - Types énumérés pour les modèles
=======================================

Centralise les statuts pour éviter les "magic strings".
"""

import enum


class PromotionStatus(enum.Enum):
    """Statuts de modération d'une promotion"""
    PENDING = 'PENDING'      # Soumise par un visiteur, en attente
    APPROVED = 'APPROVED'    # Validée, visible tant que non expirée
    REJECTED = 'REJECTED'    # Refusée par un administrateur

    @classmethod
    def is_valid(cls, status: str) -> bool:
        """Vérifie si un statut est valide"""
        return status in [s.value for s in cls]

    @classmethod
    def values(cls) -> list:
        return [s.value for s in cls]
