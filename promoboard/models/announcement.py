"""
Modèle Announcement - Annonces temporaires
Plusieurs annonces peuvent coexister; seules celles actives et dans leur période sont publiées
"""

from promoboard import db
from datetime import datetime
import uuid


class Announcement(db.Model):
    """
    Annonce publiée par l'administrateur
    Affichée sur le site public pendant sa période de validité
    """
    __tablename__ = 'announcements'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Contenu
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    image_urls = db.Column(db.JSON, default=list)

    # Période de validité
    start_date = db.Column(db.DateTime, nullable=False)
    end_date = db.Column(db.DateTime, nullable=False)

    # Visibilité
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    # Métadonnées
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def image_url(self):
        return self.image_urls[0] if self.image_urls else ''

    @property
    def is_visible(self):
        """Vérifie si l'annonce est actuellement visible"""
        from promoboard.services.visibility import is_announcement_visible
        return is_announcement_visible(self)

    def toggle_active(self):
        """Basculer l'état actif"""
        self.is_active = not self.is_active

    def to_dict(self):
        """Sérialisation en dictionnaire"""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'imageUrls': list(self.image_urls or []),
            'imageUrl': self.image_url,
            'startDate': self.start_date.isoformat() if self.start_date else None,
            'endDate': self.end_date.isoformat() if self.end_date else None,
            'isActive': self.is_active,
            'isVisible': self.is_visible,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None
        }
