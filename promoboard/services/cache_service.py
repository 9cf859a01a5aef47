"""
Cache des promotions publiques
==============================

Cache "read-through" devant GET /api/promotions, invalidé à chaque écriture admin.

- Clé unique, indépendante de la date: une réponse en cache peut montrer une
  promotion expirée au plus `ttl` secondes après son expiration.
- Best-effort: Redis absent ou en panne => lecture directe en base, sans erreur.
"""

import json
import logging
from typing import Callable, Optional

import redis

logger = logging.getLogger(__name__)

DEFAULT_KEY = 'promotions:active'
DEFAULT_TTL = 300


class PromotionCache:
    """
    Cache Redis de la liste publique des promotions

    Usage:
        cache = PromotionCache.from_url(os.environ.get('REDIS_URL'))
        payload = cache.get_or_compute(lambda: [p.to_dict() for p in query.all()])
        cache.invalidate()
    """

    def __init__(self, client: Optional[redis.Redis] = None, key: str = DEFAULT_KEY, ttl: int = DEFAULT_TTL):
        self.client = client
        self.key = key
        self.ttl = ttl

    @classmethod
    def from_url(cls, url: Optional[str], key: str = DEFAULT_KEY, ttl: int = DEFAULT_TTL,
                 socket_timeout: float = 1.0) -> 'PromotionCache':
        """
        Construit le cache depuis REDIS_URL

        Un seul essai de connexion au démarrage; en cas d'échec le cache est désactivé
        pour toute la durée du process.
        """
        if not url:
            logger.info("REDIS_URL non défini - cache des promotions désactivé")
            return cls(None, key=key, ttl=ttl)

        client = None
        try:
            client = redis.Redis.from_url(
                url,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
                decode_responses=True
            )
            client.ping()
        except (redis.RedisError, ValueError) as e:
            # ValueError: URL mal formée (schéma manquant)
            logger.warning(f"Redis indisponible ({e}) - cache des promotions désactivé")
            if client is not None:
                client.close()
            return cls(None, key=key, ttl=ttl)

        logger.info("Cache Redis des promotions connecté")
        return cls(client, key=key, ttl=ttl)

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def get(self) -> Optional[str]:
        """Lit la liste en cache (JSON), None si absente ou Redis en panne"""
        if not self.enabled:
            return None
        try:
            cached = self.client.get(self.key)
        except redis.RedisError as e:
            logger.warning(f"Lecture cache impossible: {e}")
            return None
        if isinstance(cached, bytes):
            cached = cached.decode('utf-8')
        return cached

    def set(self, payload: str) -> bool:
        if not self.enabled:
            return False
        try:
            self.client.setex(self.key, self.ttl, payload)
            return True
        except redis.RedisError as e:
            logger.warning(f"Ecriture cache impossible: {e}")
            return False

    def get_or_compute(self, compute: Callable[[], list]) -> str:
        """
        Renvoie la liste sérialisée en JSON

        Hit: la valeur en cache est renvoyée telle quelle.
        Miss: `compute()` est appelé, le résultat est sérialisé, stocké avec le TTL puis renvoyé.
        """
        cached = self.get()
        if cached is not None:
            logger.debug(f"Cache hit: {self.key}")
            return cached

        logger.debug(f"Cache miss: {self.key}")
        payload = json.dumps(compute())
        self.set(payload)
        return payload

    def invalidate(self) -> bool:
        """Supprime la clé; appelé avant de répondre à une écriture admin"""
        if not self.enabled:
            return False
        try:
            self.client.delete(self.key)
            logger.debug(f"Cache invalidé: {self.key}")
            return True
        except redis.RedisError as e:
            logger.warning(f"Invalidation cache impossible: {e}")
            return False

    def close(self):
        if self.client is not None:
            try:
                self.client.close()
            except redis.RedisError as e:
                logger.warning(f"Fermeture Redis: {e}")
