"""
Routes Admin - Gestion des annonces
Publication et gestion des annonces temporaires du site
"""

from flask import jsonify
from promoboard.routes.admin import admin_bp
from promoboard.schemas import AnnouncementEditInput, AnnouncementInput, images_from_request
from promoboard.services import get_announcement_service
from promoboard.utils.decorators import admin_required
from promoboard.utils.helpers import get_request_data


@admin_bp.route('/announcements', methods=['GET'])
@admin_required
def admin_get_announcements():
    """Liste des annonces, les plus récentes d'abord"""
    announcements = get_announcement_service().list_all()
    return jsonify([a.to_dict() for a in announcements])


@admin_bp.route('/announcements/<announcement_id>', methods=['GET'])
@admin_required
def admin_get_announcement(announcement_id):
    """Détails d'une annonce"""
    announcement = get_announcement_service().get(announcement_id)
    return jsonify({'announcement': announcement.to_dict()})


@admin_bp.route('/announcements', methods=['POST'])
@admin_required
def admin_create_announcement():
    """
    Créer une annonce

    Form data ou JSON:
        - title: Titre (requis)
        - description: Contenu
        - startDate, endDate: Période de validité (requis)
        - isActive: Activer immédiatement (défaut: true)
        - image / images: Fichier(s) image
    """
    data = AnnouncementInput.from_data(get_request_data())
    images = images_from_request()

    announcement = get_announcement_service().create(data, images)

    return jsonify({
        'message': 'Announcement created successfully',
        'announcement': announcement.to_dict()
    }), 201


@admin_bp.route('/announcements/<announcement_id>', methods=['PUT'])
@admin_required
def admin_update_announcement(announcement_id):
    """
    Mettre à jour une annonce

    Form data ou JSON:
        - title, description, startDate, endDate, isActive
        - image / images: remplacent les images existantes
    """
    changes = AnnouncementEditInput.from_data(get_request_data())
    images = images_from_request()

    announcement = get_announcement_service().edit(announcement_id, changes, images)

    return jsonify({
        'message': 'Announcement updated',
        'announcement': announcement.to_dict()
    })


@admin_bp.route('/announcements/<announcement_id>/toggle', methods=['POST'])
@admin_required
def admin_toggle_announcement(announcement_id):
    """Activer/Désactiver une annonce"""
    announcement = get_announcement_service().toggle(announcement_id)
    status = 'activated' if announcement.is_active else 'deactivated'

    return jsonify({
        'message': f'Announcement {status}',
        'isActive': announcement.is_active
    })


@admin_bp.route('/announcements/<announcement_id>', methods=['DELETE'])
@admin_required
def admin_delete_announcement(announcement_id):
    """Supprimer une annonce"""
    get_announcement_service().delete(announcement_id)
    return jsonify({'message': 'Deleted successfully'})
