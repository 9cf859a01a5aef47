"""
Schémas d'entrée
================

Chaque endpoint lit son corps via un schéma explicite: seuls les champs
listés ici sont extraits et typés, le reste du corps est ignoré.
"""

import re
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Optional

from flask import current_app

from promoboard.models.enums import PromotionStatus
from promoboard.utils.errors import ValidationError
from promoboard.utils.helpers import get_uploaded_images, parse_bool, parse_date, parse_datetime

TITLE_MAX_LENGTH = 200
COLOR_PATTERN = re.compile(r'^#(?:[0-9a-fA-F]{3}){1,2}$')


def _text(data: dict, name: str) -> Optional[str]:
    value = data.get(name)
    if value is None:
        return None
    return str(value).strip()


def _title(data: dict, required: bool) -> Optional[str]:
    if 'title' not in data and not required:
        return None
    title = _text(data, 'title')
    if not title:
        raise ValidationError('Title is required', field='title')
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f'Title must be at most {TITLE_MAX_LENGTH} characters', field='title')
    return title


def _date(data: dict, name: str, required: bool) -> Optional[date]:
    value = _text(data, name)
    if not value:
        if required:
            raise ValidationError(f'{name} is required', field=name)
        return None
    try:
        return parse_date(value)
    except ValueError:
        raise ValidationError(f'{name} must be an ISO date (YYYY-MM-DD)', field=name)


def _datetime(data: dict, name: str, required: bool) -> Optional[datetime]:
    value = _text(data, name)
    if not value:
        if required:
            raise ValidationError(f'{name} is required', field=name)
        return None
    try:
        return parse_datetime(value)
    except ValueError:
        raise ValidationError(f'{name} must be an ISO date or datetime', field=name)


def _color(data: dict) -> Optional[str]:
    color = _text(data, 'color')
    if not color:
        return None
    if not COLOR_PATTERN.match(color):
        raise ValidationError('color must be a hex value like #4F46E5', field='color')
    return color


def _bool(data: dict, name: str) -> Optional[bool]:
    if name not in data or data.get(name) in (None, ''):
        return None
    try:
        return parse_bool(data[name])
    except ValueError:
        raise ValidationError(f'{name} must be a boolean', field=name)


@dataclass
class PromotionInput:
    """Création d'une promotion (visiteur ou admin)"""
    title: str
    start: date
    end: date
    description: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_data(cls, data: dict) -> 'PromotionInput':
        return cls(
            title=_title(data, required=True),
            start=_date(data, 'start', required=True),
            end=_date(data, 'end', required=True),
            description=_text(data, 'description'),
            color=_color(data),
        )


@dataclass
class PromotionEditInput:
    """Modification partielle: un champ absent n'est pas modifié"""
    title: Optional[str] = None
    description: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None
    color: Optional[str] = None

    @classmethod
    def from_data(cls, data: dict) -> 'PromotionEditInput':
        return cls(
            title=_title(data, required=False),
            description=_text(data, 'description'),
            start=_date(data, 'start', required=False),
            end=_date(data, 'end', required=False),
            color=_color(data),
        )

    def changes(self) -> dict:
        """Champs fournis, prêts à être appliqués au modèle"""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class StatusInput:
    status: str

    @classmethod
    def from_data(cls, data: dict) -> 'StatusInput':
        status = (_text(data, 'status') or '').upper()
        if not PromotionStatus.is_valid(status):
            raise ValidationError(
                f"status must be one of {', '.join(PromotionStatus.values())}",
                field='status'
            )
        return cls(status=status)


@dataclass
class AnnouncementInput:
    """Création d'une annonce"""
    title: str
    start_date: datetime
    end_date: datetime
    description: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_data(cls, data: dict) -> 'AnnouncementInput':
        is_active = _bool(data, 'isActive')
        return cls(
            title=_title(data, required=True),
            start_date=_datetime(data, 'startDate', required=True),
            end_date=_datetime(data, 'endDate', required=True),
            description=_text(data, 'description'),
            is_active=True if is_active is None else is_active,
        )


@dataclass
class AnnouncementEditInput:
    title: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_active: Optional[bool] = None

    @classmethod
    def from_data(cls, data: dict) -> 'AnnouncementEditInput':
        return cls(
            title=_title(data, required=False),
            description=_text(data, 'description'),
            start_date=_datetime(data, 'startDate', required=False),
            end_date=_datetime(data, 'endDate', required=False),
            is_active=_bool(data, 'isActive'),
        )

    def changes(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass
class LoginInput:
    password: str = field(repr=False)

    @classmethod
    def from_data(cls, data: dict) -> 'LoginInput':
        password = data.get('password')
        if not password or not isinstance(password, str):
            raise ValidationError('Password is required', field='password')
        return cls(password=password)


@dataclass
class ImageUpload:
    """Fichier image validé, prêt à être envoyé à l'hébergeur"""
    filename: str
    content: bytes

    @classmethod
    def from_file(cls, file, allowed_extensions: set, max_size: int) -> 'ImageUpload':
        extension = file.filename.rsplit('.', 1)[1].lower() if '.' in file.filename else ''
        if extension not in allowed_extensions:
            raise ValidationError(
                f"File type not allowed. Accepted: {', '.join(sorted(allowed_extensions))}",
                field='image'
            )
        if file.mimetype and not file.mimetype.startswith('image/') and file.mimetype != 'application/octet-stream':
            raise ValidationError('Uploaded file is not an image', field='image')

        content = file.read()
        if not content:
            raise ValidationError('Uploaded file is empty', field='image')
        if len(content) > max_size:
            raise ValidationError(f'File too large. Max: {max_size // (1024 * 1024)} MB', field='image')

        return cls(filename=file.filename, content=content)


def images_from_request() -> list:
    """Valide les fichiers image de la requête courante"""
    max_size = current_app.config['MAX_UPLOAD_MB'] * 1024 * 1024
    allowed = current_app.config['ALLOWED_IMAGE_EXTENSIONS']
    return [ImageUpload.from_file(f, allowed, max_size) for f in get_uploaded_images()]
