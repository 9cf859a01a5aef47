"""
Routes Admin - Modération des promotions
Liste complète, création approuvée, changement de statut, édition, suppression
"""

from flask import jsonify
from promoboard.routes.admin import admin_bp
from promoboard.schemas import PromotionEditInput, PromotionInput, StatusInput, images_from_request
from promoboard.services import get_promotion_service
from promoboard.utils.decorators import admin_required
from promoboard.utils.helpers import get_request_data


@admin_bp.route('/promotions', methods=['GET'])
@admin_required
def admin_get_promotions():
    """Toutes les promotions, tous statuts, les plus récentes d'abord"""
    promotions = get_promotion_service().list_all()
    return jsonify([p.to_dict() for p in promotions])


@admin_bp.route('/promotions/<promotion_id>', methods=['GET'])
@admin_required
def admin_get_promotion(promotion_id):
    """Détails d'une promotion"""
    promotion = get_promotion_service().get(promotion_id)
    return jsonify({'promotion': promotion.to_dict()})


@admin_bp.route('/promotions', methods=['POST'])
@admin_required
def admin_create_promotion():
    """
    Créer une promotion (approuvée d'office)

    Form data ou JSON:
        - title, start, end (requis)
        - description, color
        - image / images: Fichier(s) image
    """
    data = PromotionInput.from_data(get_request_data())
    images = images_from_request()

    promotion = get_promotion_service().create_approved(data, images)

    return jsonify({
        'message': 'Created successfully',
        'promotion': promotion.to_dict()
    }), 201


@admin_bp.route('/promotions/<promotion_id>', methods=['PUT'])
@admin_required
def admin_update_promotion_status(promotion_id):
    """
    Approuver / rejeter une promotion

    Body:
        - status: PENDING, APPROVED ou REJECTED
    """
    data = StatusInput.from_data(get_request_data())
    promotion = get_promotion_service().update_status(promotion_id, data.status)

    return jsonify({
        'message': 'Status updated',
        'promotion': promotion.to_dict()
    })


@admin_bp.route('/promotions/<promotion_id>/edit', methods=['PUT'])
@admin_required
def admin_edit_promotion(promotion_id):
    """
    Modifier le contenu d'une promotion (le statut ne change pas)

    Form data ou JSON:
        - title, description, start, end, color (optionnels)
        - image / images: remplacent les images existantes
    """
    changes = PromotionEditInput.from_data(get_request_data())
    images = images_from_request()

    promotion = get_promotion_service().edit(promotion_id, changes, images)

    return jsonify({
        'message': 'Updated successfully',
        'promotion': promotion.to_dict()
    })


@admin_bp.route('/promotions/<promotion_id>', methods=['DELETE'])
@admin_required
def admin_delete_promotion(promotion_id):
    """Supprimer une promotion"""
    get_promotion_service().delete(promotion_id)
    return jsonify({'message': 'Deleted successfully'})
