"""
Erreurs applicatives
Chaque erreur porte son code HTTP et un code machine renvoyé au client
"""


class ApiError(Exception):
    """Erreur de base convertie en réponse JSON par le handler global"""
    status_code = 500
    code = 'INTERNAL_ERROR'

    def __init__(self, message: str = None, status_code: int = None, code: str = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message or 'Internal server error'
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {'error': self.message, 'code': self.code}


class ValidationError(ApiError):
    """Champ manquant ou invalide"""
    status_code = 400
    code = 'VALIDATION_ERROR'

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.field:
            data['field'] = self.field
        return data


class AuthError(ApiError):
    """Token absent ou mot de passe incorrect"""
    status_code = 401
    code = 'UNAUTHORIZED'


class ForbiddenError(AuthError):
    """Token invalide, expiré ou sans le rôle requis"""
    status_code = 403
    code = 'FORBIDDEN'


class NotFoundError(ApiError):
    status_code = 404
    code = 'NOT_FOUND'


class UpstreamError(ApiError):
    """Echec de l'hébergeur d'images"""
    status_code = 502
    code = 'UPSTREAM_ERROR'


class StoreError(ApiError):
    """Echec de la base de données"""
    status_code = 500
    code = 'STORE_ERROR'
