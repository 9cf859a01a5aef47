"""
Règles de visibilité: prédicats en mémoire et requêtes équivalentes
"""

from datetime import datetime, timedelta

import pytest

from promoboard.models import Announcement, Promotion, PromotionStatus
from promoboard.services.visibility import (
    STATUS_TRANSITIONS, all_promotions_query, apply_status, is_announcement_visible,
    is_promotion_visible, midnight, visible_announcements_query, visible_promotions_query
)

NOW = datetime(2024, 1, 10, 15, 30, 12, 5000)


def promotion(status='APPROVED', start='2024-01-01', end='2024-01-10'):
    return Promotion(
        title='Sale',
        status=status,
        start=datetime.fromisoformat(start).date(),
        end=datetime.fromisoformat(end).date()
    )


def announcement(is_active=True, start_date=datetime(2024, 1, 1), end_date=datetime(2024, 1, 20)):
    return Announcement(title='Notice', is_active=is_active, start_date=start_date, end_date=end_date)


def test_midnight_truncates_time():
    assert midnight(NOW) == datetime(2024, 1, 10)


def test_approved_promotion_visible_through_its_end_date():
    assert is_promotion_visible(promotion(end='2024-01-10'), NOW)
    assert not is_promotion_visible(promotion(end='2024-01-09'), NOW)


@pytest.mark.parametrize('status', ['PENDING', 'REJECTED'])
def test_unapproved_promotion_never_visible(status):
    assert not is_promotion_visible(promotion(status=status, end='2030-01-01'), NOW)


def test_promotion_start_date_is_not_checked():
    # Une promotion approuvée avec un début futur est déjà publiée
    future = promotion(start='2024-02-01', end='2024-02-10')
    assert is_promotion_visible(future, NOW)


def test_announcement_requires_both_bounds():
    assert is_announcement_visible(announcement(), NOW)
    assert not is_announcement_visible(announcement(start_date=NOW + timedelta(minutes=1)), NOW)
    assert not is_announcement_visible(announcement(end_date=datetime(2024, 1, 9, 23, 59)), NOW)


def test_announcement_end_date_compared_to_midnight():
    # Fin à 00:00 aujourd'hui: encore visible toute la journée
    assert is_announcement_visible(announcement(end_date=datetime(2024, 1, 10)), NOW)


def test_inactive_announcement_hidden():
    assert not is_announcement_visible(announcement(is_active=False), NOW)


def test_every_status_can_reach_every_status():
    values = {s.value for s in PromotionStatus}
    for source in values:
        assert STATUS_TRANSITIONS[source] == values


def test_apply_status_has_no_guard():
    p = promotion(status='REJECTED')
    apply_status(p, 'APPROVED')
    assert p.status == 'APPROVED'
    apply_status(p, 'REJECTED')
    assert p.status == 'REJECTED'
    apply_status(p, 'PENDING')
    assert p.status == 'PENDING'


def test_apply_status_rejects_unknown_value():
    with pytest.raises(ValueError):
        apply_status(promotion(), 'ARCHIVED')


def test_visible_promotions_query_matches_predicate(make_promotion, today):
    live = make_promotion('Live', end=today, status='APPROVED')
    early = make_promotion('Early', start=today + timedelta(days=30), end=today + timedelta(days=40),
                           status='APPROVED')
    make_promotion('Expired', start=today - timedelta(days=10), end=today - timedelta(days=1),
                   status='APPROVED')
    make_promotion('Pending', status='PENDING')
    make_promotion('Rejected', status='REJECTED')

    titles = {p.title for p in visible_promotions_query().all()}

    assert titles == {live.title, early.title}


def test_visible_announcements_query_newest_first(make_announcement):
    now = datetime.utcnow()
    older = make_announcement('Older')
    older.created_at = now - timedelta(days=2)
    newer = make_announcement('Newer')
    newer.created_at = now - timedelta(days=1)
    make_announcement('Future', start_date=now + timedelta(days=1))
    make_announcement('Ended', start_date=now - timedelta(days=5), end_date=now - timedelta(days=2))
    make_announcement('Off', is_active=False)

    titles = [a.title for a in visible_announcements_query(now).all()]

    assert titles == ['Newer', 'Older']


def test_admin_listing_includes_everything_newest_first(make_promotion, today):
    first = make_promotion('First', status='REJECTED', end=today - timedelta(days=100))
    first.created_at = datetime(2020, 1, 1)
    make_promotion('Second', status='PENDING')

    titles = [p.title for p in all_promotions_query().all()]

    assert titles == ['Second', 'First']
