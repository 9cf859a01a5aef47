"""
Routes Admin - Blueprint principal
Regroupe toutes les routes de modération
"""

from flask import Blueprint

# Blueprint principal admin
admin_bp = Blueprint('admin', __name__)

# Import des sous-modules après création du blueprint
from promoboard.routes.admin import auth
from promoboard.routes.admin import promotions
from promoboard.routes.admin import announcements
