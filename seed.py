#!/usr/bin/env python3
"""
Seed demo data for the Promoboard backend.

Creates:
  1. Database tables (if missing)
  2. A pending, an approved and an expired promotion
  3. One live announcement

Usage:
    python seed.py
"""

import os

from dotenv import load_dotenv
load_dotenv()

from datetime import timedelta
from promoboard import create_app, db, shutdown_app
from promoboard.utils.helpers import utcnow


def seed():
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)

    with app.app_context():
        from promoboard.models import Announcement, Promotion, PromotionStatus

        # 1. Create tables
        db.create_all()
        print('✓ Tables créées / vérifiées')

        if Promotion.query.first():
            print('• Données déjà présentes, rien à faire')
            return

        now = utcnow()
        today = now.date()

        # 2. Promotions
        db.session.add_all([
            Promotion(
                title='Weekend Sale',
                description='20% off everything this weekend',
                start=today,
                end=today + timedelta(days=3),
                color='#DC2626',
                status=PromotionStatus.PENDING.value
            ),
            Promotion(
                title='Grand Opening',
                description='Free coffee for the first 100 customers',
                start=today - timedelta(days=1),
                end=today + timedelta(days=14),
                color=app.config['DEFAULT_PROMOTION_COLOR'],
                status=PromotionStatus.APPROVED.value
            ),
            Promotion(
                title='Last Month Clearance',
                start=today - timedelta(days=40),
                end=today - timedelta(days=10),
                color=app.config['DEFAULT_PROMOTION_COLOR'],
                status=PromotionStatus.APPROVED.value
            ),
        ])
        print('✓ Promotions (1 en attente, 1 en ligne, 1 expirée)')

        # 3. Announcement
        db.session.add(Announcement(
            title='Holiday opening hours',
            description='The shop closes at 18:00 during the holidays.',
            start_date=now - timedelta(hours=1),
            end_date=now + timedelta(days=7),
            is_active=True
        ))
        db.session.commit()
        print('✓ Annonce en ligne')

        app.extensions['promotion_cache'].invalidate()

    shutdown_app(app)


if __name__ == '__main__':
    seed()
