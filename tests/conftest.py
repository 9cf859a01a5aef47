"""
Fixtures partagées: application de test, clients externes simulés, token admin
"""

from datetime import timedelta

import pytest
import redis
from flask_jwt_extended import create_access_token

from promoboard import create_app, db
from promoboard.models import Announcement, Promotion, PromotionStatus
from promoboard.services.cache_service import PromotionCache
from promoboard.services.image_service import UploadResult
from promoboard.utils.errors import UpstreamError
from promoboard.utils.helpers import utcnow


class InMemoryRedis:
    """Client Redis minimal en mémoire (get / setex / delete)"""

    def __init__(self):
        self.store = {}
        self.ttls = {}
        self.calls = []

    def get(self, key):
        self.calls.append(('get', key))
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.calls.append(('setex', key))
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    def delete(self, key):
        self.calls.append(('delete', key))
        self.ttls.pop(key, None)
        return 1 if self.store.pop(key, None) is not None else 0

    def close(self):
        pass


class UnreachableRedis:
    """Client Redis dont chaque appel échoue comme un serveur injoignable"""

    def __init__(self):
        self.attempts = 0

    def _fail(self, *args, **kwargs):
        self.attempts += 1
        raise redis.ConnectionError('Connection refused')

    get = setex = delete = _fail

    def close(self):
        pass


class RecordingImageRelay:
    """Relais d'images qui renvoie des URLs prévisibles sans appel réseau"""

    def __init__(self, fail=False):
        self.fail = fail
        self.uploaded = []

    def upload_image(self, image, folder=None):
        if self.fail:
            return UploadResult(success=False, error='host unavailable')
        self.uploaded.append(image)
        url = f'https://images.example.com/{image.filename}'
        return UploadResult(success=True, url=url, secure_url=url)

    def upload_all(self, images, folder=None):
        urls = []
        for image in images:
            result = self.upload_image(image, folder)
            if not result.success:
                raise UpstreamError(f'Image upload failed: {result.error}')
            urls.append(result.secure_url)
        return urls


def build_app(cache=None, image_relay=None):
    app = create_app('testing', cache=cache, image_relay=image_relay)
    return app


@pytest.fixture
def redis_client():
    return InMemoryRedis()


@pytest.fixture
def cache(redis_client):
    return PromotionCache(redis_client, ttl=300)


@pytest.fixture
def image_relay():
    return RecordingImageRelay()


@pytest.fixture
def app(cache, image_relay):
    app = build_app(cache=cache, image_relay=image_relay)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(app):
    token = create_access_token(identity='admin', additional_claims={'role': 'ADMIN'})
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def today():
    return utcnow().date()


@pytest.fixture
def make_promotion(app):
    def _make(title='Sale', start=None, end=None, status=PromotionStatus.PENDING.value, **kwargs):
        today = utcnow().date()
        promotion = Promotion(
            title=title,
            start=start or today,
            end=end or today + timedelta(days=7),
            status=status,
            color=kwargs.pop('color', '#4F46E5'),
            image_urls=kwargs.pop('image_urls', []),
            **kwargs
        )
        db.session.add(promotion)
        db.session.commit()
        return promotion
    return _make


@pytest.fixture
def make_announcement(app):
    def _make(title='Notice', start_date=None, end_date=None, is_active=True, **kwargs):
        now = utcnow()
        announcement = Announcement(
            title=title,
            start_date=start_date or now - timedelta(hours=1),
            end_date=end_date or now + timedelta(days=7),
            is_active=is_active,
            image_urls=kwargs.pop('image_urls', []),
            **kwargs
        )
        db.session.add(announcement)
        db.session.commit()
        return announcement
    return _make
