"""
Service d'hébergement des images
================================

Envoie les images des promotions et annonces vers Cloudinary
et renvoie leur URL publique.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional

import cloudinary
import cloudinary.uploader

from promoboard.utils.errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    """Résultat d'un upload"""
    success: bool
    url: Optional[str] = None
    secure_url: Optional[str] = None
    error: Optional[str] = None


class ImageRelay:
    """
    Relais d'upload vers Cloudinary

    Usage:
        relay = ImageRelay.from_config(app.config)
        urls = relay.upload_all(images)
    """

    def __init__(self, cloud_name: str = None, api_key: str = None, api_secret: str = None,
                 folder: str = 'promotions'):
        self.folder = folder
        self._configured = False

        if not all([cloud_name, api_key, api_secret]):
            logger.warning("Cloudinary non configuré - les uploads d'images échoueront")
            return

        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True
        )
        self._configured = True

    @classmethod
    def from_config(cls, config) -> 'ImageRelay':
        return cls(
            cloud_name=config.get('CLOUDINARY_CLOUD_NAME'),
            api_key=config.get('CLOUDINARY_API_KEY'),
            api_secret=config.get('CLOUDINARY_API_SECRET'),
            folder=config.get('CLOUDINARY_FOLDER', 'promotions')
        )

    @property
    def is_configured(self) -> bool:
        return self._configured

    def upload_image(self, image, folder: str = None) -> UploadResult:
        """
        Upload une image vers Cloudinary

        Args:
            image: ImageUpload (nom + contenu binaire)
            folder: Dossier de destination (défaut: CLOUDINARY_FOLDER)

        Returns:
            UploadResult avec les infos de l'upload
        """
        if not self.is_configured:
            return UploadResult(success=False, error="Image host not configured")

        try:
            result = cloudinary.uploader.upload(
                io.BytesIO(image.content),
                folder=folder or self.folder,
                resource_type='image',
                transformation={
                    'quality': 'auto:good',
                    'fetch_format': 'auto'
                }
            )

            logger.info(f"Image uploadée: {result.get('public_id')}")

            return UploadResult(
                success=True,
                url=result.get('url'),
                secure_url=result.get('secure_url')
            )

        except Exception as e:
            logger.error(f"Erreur upload Cloudinary: {str(e)}")
            return UploadResult(success=False, error=str(e))

    def upload_all(self, images: list, folder: str = None) -> list:
        """
        Upload toutes les images, dans l'ordre

        Returns:
            list: URLs publiques

        Raises:
            UpstreamError: au premier échec (aucune écriture en base ne doit suivre)
        """
        urls = []
        for image in images:
            result = self.upload_image(image, folder=folder)
            if not result.success:
                raise UpstreamError(f"Image upload failed: {result.error}")
            urls.append(result.secure_url or result.url)
        return urls
