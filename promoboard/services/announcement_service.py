"""
Service Annonces
================

Plusieurs annonces peuvent coexister; la liste publique n'est jamais mise en cache.
"""

import logging

from promoboard import db
from promoboard.models import Announcement
from promoboard.services import store
from promoboard.services.visibility import all_announcements_query, visible_announcements_query

logger = logging.getLogger(__name__)


class AnnouncementService:

    def __init__(self, image_relay):
        self.image_relay = image_relay

    def list_visible(self, now=None) -> list:
        return store.fetch_all(visible_announcements_query(now))

    def list_all(self) -> list:
        return store.fetch_all(all_announcements_query())

    def get(self, announcement_id: str) -> Announcement:
        return store.get_or_404(Announcement, announcement_id, 'Announcement')

    def create(self, data, images=None) -> Announcement:
        image_urls = self.image_relay.upload_all(images) if images else []

        announcement = Announcement(
            title=data.title,
            description=data.description,
            start_date=data.start_date,
            end_date=data.end_date,
            is_active=data.is_active,
            image_urls=image_urls
        )
        db.session.add(announcement)
        store.commit('create announcement')
        logger.info(f"Annonce créée: {announcement.id}")
        return announcement

    def edit(self, announcement_id: str, changes, images=None) -> Announcement:
        announcement = self.get(announcement_id)
        image_urls = self.image_relay.upload_all(images) if images else None

        for name, value in changes.changes().items():
            setattr(announcement, name, value)
        if image_urls:
            announcement.image_urls = image_urls

        store.commit('edit announcement')
        logger.info(f"Annonce modifiée: {announcement.id}")
        return announcement

    def toggle(self, announcement_id: str) -> Announcement:
        announcement = self.get(announcement_id)
        announcement.toggle_active()
        store.commit('toggle announcement')
        return announcement

    def delete(self, announcement_id: str):
        announcement = self.get(announcement_id)
        db.session.delete(announcement)
        store.commit('delete announcement')
        logger.info(f"Annonce supprimée: {announcement_id}")
