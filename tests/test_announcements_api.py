"""
Annonces: liste publique (période + actif), gestion admin
"""

import io
from datetime import timedelta

from promoboard.models import Announcement
from promoboard.utils.helpers import utcnow


def test_public_list_only_live_announcements(client, make_announcement):
    now = utcnow()
    make_announcement('Live')
    make_announcement('Not Yet', start_date=now + timedelta(days=1), end_date=now + timedelta(days=3))
    make_announcement('Over', start_date=now - timedelta(days=5), end_date=now - timedelta(days=1, hours=1))
    make_announcement('Disabled', is_active=False)

    response = client.get('/api/announcement')

    assert response.status_code == 200
    assert [a['title'] for a in response.get_json()] == ['Live']


def test_plural_route_is_an_alias(client, make_announcement):
    make_announcement('Live')
    assert client.get('/api/announcements').get_json() == client.get('/api/announcement').get_json()


def test_public_list_newest_first(client, make_announcement):
    older = make_announcement('Older')
    older.created_at = utcnow() - timedelta(days=1)
    make_announcement('Newer')

    assert [a['title'] for a in client.get('/api/announcement').get_json()] == ['Newer', 'Older']


def test_announcement_ending_today_stays_visible(client, make_announcement):
    midnight = utcnow().replace(hour=0, minute=0, second=0, microsecond=0)
    make_announcement('Last Day', start_date=midnight - timedelta(days=3), end_date=midnight)

    assert [a['title'] for a in client.get('/api/announcement').get_json()] == ['Last Day']


def test_public_list_is_never_cached(client, redis_client, make_announcement):
    make_announcement('Live')
    client.get('/api/announcement')
    assert redis_client.calls == []


def test_admin_requires_token(client):
    assert client.get('/api/admin/announcements').status_code == 401
    assert client.post('/api/admin/announcements', json={}).status_code == 401


def test_admin_create_announcement(client, admin_headers, redis_client):
    today = utcnow().date()

    response = client.post('/api/admin/announcements', data={
        'title': 'Closed Monday',
        'description': 'Inventory day',
        'startDate': (today - timedelta(days=1)).isoformat(),
        'endDate': (today + timedelta(days=1)).isoformat(),
        'images': [(io.BytesIO(b'1'), 'one.png'), (io.BytesIO(b'2'), 'two.png')],
    }, headers=admin_headers, content_type='multipart/form-data')

    assert response.status_code == 201
    body = response.get_json()['announcement']
    assert body['isActive'] is True
    assert body['isVisible'] is True
    assert body['imageUrls'] == ['https://images.example.com/one.png', 'https://images.example.com/two.png']
    assert [a['title'] for a in client.get('/api/announcement').get_json()] == ['Closed Monday']
    assert redis_client.calls == []


def test_admin_create_inactive(client, admin_headers):
    today = utcnow().date()
    response = client.post('/api/admin/announcements', json={
        'title': 'Draft',
        'startDate': today.isoformat(),
        'endDate': (today + timedelta(days=2)).isoformat(),
        'isActive': False,
    }, headers=admin_headers)

    assert response.get_json()['announcement']['isActive'] is False
    assert client.get('/api/announcement').get_json() == []


def test_admin_create_accepts_browser_datetimes(client, admin_headers):
    response = client.post('/api/admin/announcements', json={
        'title': 'Precise',
        'startDate': '2024-03-01T08:30:00.000Z',
        'endDate': '2024-03-02T18:00:00+02:00',
    }, headers=admin_headers)

    body = response.get_json()['announcement']
    assert body['startDate'] == '2024-03-01T08:30:00'
    assert body['endDate'] == '2024-03-02T16:00:00'


def test_admin_create_validation(client, admin_headers):
    response = client.post('/api/admin/announcements', json={'title': 'No dates'}, headers=admin_headers)

    assert response.status_code == 400
    assert response.get_json()['field'] == 'startDate'
    assert Announcement.query.count() == 0


def test_admin_list_includes_everything(client, admin_headers, make_announcement):
    now = utcnow()
    make_announcement('Live')
    make_announcement('Disabled', is_active=False)
    make_announcement('Over', start_date=now - timedelta(days=9), end_date=now - timedelta(days=8))

    titles = {a['title'] for a in client.get('/api/admin/announcements', headers=admin_headers).get_json()}

    assert titles == {'Live', 'Disabled', 'Over'}


def test_admin_update_announcement(client, admin_headers, make_announcement):
    announcement = make_announcement('Old Title')

    response = client.put(f'/api/admin/announcements/{announcement.id}', json={
        'title': 'New Title', 'isActive': 'false'
    }, headers=admin_headers)

    body = response.get_json()['announcement']
    assert body['title'] == 'New Title'
    assert body['isActive'] is False


def test_admin_toggle_announcement(client, admin_headers, make_announcement):
    announcement = make_announcement('Toggle')

    first = client.post(f'/api/admin/announcements/{announcement.id}/toggle', headers=admin_headers)
    second = client.post(f'/api/admin/announcements/{announcement.id}/toggle', headers=admin_headers)

    assert first.get_json() == {'message': 'Announcement deactivated', 'isActive': False}
    assert second.get_json()['isActive'] is True


def test_admin_delete_announcement(client, admin_headers, make_announcement):
    announcement = make_announcement('Bye')

    assert client.delete(f'/api/admin/announcements/{announcement.id}', headers=admin_headers).status_code == 200
    assert client.get('/api/announcement').get_json() == []
    assert client.delete(f'/api/admin/announcements/{announcement.id}', headers=admin_headers).status_code == 404


def test_admin_get_unknown_announcement(client, admin_headers):
    assert client.get('/api/admin/announcements/unknown', headers=admin_headers).status_code == 404
