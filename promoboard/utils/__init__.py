from promoboard.utils.decorators import admin_required
from promoboard.utils.errors import (
    ApiError, ValidationError, AuthError, ForbiddenError,
    NotFoundError, UpstreamError, StoreError
)

__all__ = [
    'admin_required',
    'ApiError',
    'ValidationError',
    'AuthError',
    'ForbiddenError',
    'NotFoundError',
    'UpstreamError',
    'StoreError'
]
