"""
Routes publiques - Site vitrine
Liste des promotions en ligne, soumission par les visiteurs, annonces en cours
"""

from flask import Blueprint, current_app, jsonify
from promoboard import limiter
from promoboard.schemas import PromotionInput, images_from_request
from promoboard.services import get_announcement_service, get_promotion_service
from promoboard.utils.helpers import get_request_data
import logging

public_bp = Blueprint('public', __name__)
logger = logging.getLogger(__name__)


@public_bp.route('/promotions', methods=['GET'])
def get_promotions():
    """
    Promotions en ligne (approuvées et non expirées)

    Réponse mise en cache (PROMOTIONS_CACHE_TTL secondes), renvoyée telle quelle sur hit.
    """
    payload = get_promotion_service().list_visible()
    return current_app.response_class(payload, mimetype='application/json')


@public_bp.route('/promotions', methods=['POST'])
@limiter.limit("20 per hour")
def submit_promotion():
    """
    Soumettre une promotion (visiteur)

    Form data ou JSON:
        - title: Titre (requis)
        - description: Description
        - start, end: Période d'affichage YYYY-MM-DD (requis)
        - color: Couleur #RRGGBB
        - image / images: Fichier(s) image
    """
    data = PromotionInput.from_data(get_request_data())
    images = images_from_request()

    promotion = get_promotion_service().submit(data, images)

    return jsonify({
        'message': 'Submission Received',
        'promotion': promotion.to_dict()
    }), 201


@public_bp.route('/announcement', methods=['GET'])
@public_bp.route('/announcements', methods=['GET'])
def get_announcements():
    """Annonces actives dans leur période de validité, les plus récentes d'abord"""
    announcements = get_announcement_service().list_visible()
    return jsonify([a.to_dict() for a in announcements])
