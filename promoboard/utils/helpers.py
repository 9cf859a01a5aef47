"""
Fonctions utilitaires
Helpers réutilisables dans toute l'application
"""

from flask import request
from datetime import date, datetime, timezone

TRUE_VALUES = {'true', '1', 'yes', 'on'}
FALSE_VALUES = {'false', '0', 'no', 'off'}


def utcnow() -> datetime:
    """Horloge de référence (UTC naïf, comme les colonnes DateTime)"""
    return datetime.utcnow()


def get_request_data() -> dict:
    """
    Récupère le corps de la requête, JSON ou formulaire multipart

    Returns:
        dict: champs bruts (à filtrer par un schéma)
    """
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def get_uploaded_images() -> list:
    """
    Fichiers image envoyés: champ unique 'image' et/ou champ répété 'images'

    Returns:
        list: FileStorage non vides, dans l'ordre d'envoi
    """
    files = []
    if 'image' in request.files:
        files.append(request.files['image'])
    files.extend(request.files.getlist('images'))
    return [f for f in files if f and f.filename]


def parse_datetime(value) -> datetime:
    """
    Parse une date ou date-heure ISO 8601

    Accepte 'YYYY-MM-DD' (minuit) et les formats ISO complets,
    y compris le suffixe 'Z' envoyé par les navigateurs.
    Les valeurs avec fuseau sont converties en UTC naïf.

    Raises:
        ValueError: si la valeur n'est pas une date ISO
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_date(value) -> date:
    """Parse une date ISO; une date-heure est tronquée au jour"""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_datetime(value).date()


def parse_bool(value) -> bool:
    """
    Interprète un booléen venant d'un formulaire ou de JSON

    Raises:
        ValueError: valeur non reconnue
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean: {value!r}")
