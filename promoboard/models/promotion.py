"""
Modèle Promotion - Promotions soumises et modérées
Une promotion est visible publiquement une fois approuvée et tant que sa date de fin n'est pas passée
"""

from promoboard import db
from promoboard.models.enums import PromotionStatus
from datetime import datetime
import uuid


class Promotion(db.Model):
    """
    Promotion proposée par un visiteur ou créée par un administrateur
    """
    __tablename__ = 'promotions'

    __table_args__ = (
        db.Index('idx_promotion_status_end', 'status', 'end'),
        db.Index('idx_promotion_created', 'created_at'),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Contenu
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)

    # URLs des images hébergées (ordre conservé)
    image_urls = db.Column(db.JSON, default=list)

    # Période d'affichage (bornes incluses)
    start = db.Column(db.Date, nullable=False)
    end = db.Column(db.Date, nullable=False)

    color = db.Column(db.String(20))

    # Modération: PENDING, APPROVED, REJECTED
    status = db.Column(db.String(20), nullable=False, default=PromotionStatus.PENDING.value)

    # Métadonnées
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def image_url(self):
        """Première image (compatibilité avec l'ancien champ unique)"""
        return self.image_urls[0] if self.image_urls else ''

    def to_dict(self):
        """Sérialisation en dictionnaire"""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'imageUrls': list(self.image_urls or []),
            'imageUrl': self.image_url,
            'start': self.start.isoformat() if self.start else None,
            'end': self.end.isoformat() if self.end else None,
            'color': self.color,
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None
        }

    def __repr__(self):
        return f'<Promotion {self.title} [{self.status}]>'
