"""Create portal tables

Revision ID: 3f6c2a9d1e04
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f6c2a9d1e04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column('id', sa.String(length=36), primary_key=True)


def _created(name: str) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def upgrade() -> None:
    """Upgrade schema - every table the portal reads and writes."""
    op.create_table('jobs',
        _id(),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('department', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('qualification', sa.Text(), nullable=False),
        sa.Column('vacancies', sa.String(), nullable=False),
        sa.Column('posted_date', sa.Date(), nullable=False),
        sa.Column('last_date', sa.Date(), nullable=False),
        sa.Column('apply_link', sa.String(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        _created('created_at'),
        sa.Column('affiliate_courses_json', sa.Text(), nullable=True),
        sa.Column('affiliate_books_json', sa.Text(), nullable=True),
    )
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_category', 'jobs', ['category'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])
    op.create_index('ix_jobs_created_at', 'jobs', ['created_at'])

    op.create_table('content_posts',
        _id(),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('published_date', sa.Date(), nullable=False),
        _created('created_at'),
        sa.Column('exam_date', sa.Date(), nullable=True),
        sa.Column('details_url', sa.String(), nullable=True),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('seo_title', sa.String(), nullable=True),
        sa.Column('seo_description', sa.Text(), nullable=True),
    )
    op.create_index('ix_content_posts_status', 'content_posts', ['status'])
    op.create_index('ix_content_posts_type', 'content_posts', ['type'])
    op.create_index('ix_content_posts_created_at', 'content_posts', ['created_at'])

    op.create_table('breaking_news',
        _id(),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('link', sa.String(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
    )

    op.create_table('quick_links',
        _id(),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
    )
    op.create_index('ix_quick_links_title', 'quick_links', ['title'])

    op.create_table('upcoming_exams',
        _id(),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('deadline', sa.Date(), nullable=False),
        sa.Column('notification_link', sa.String(), nullable=False),
    )
    op.create_index('ix_upcoming_exams_deadline', 'upcoming_exams', ['deadline'])

    op.create_table('preparation_books',
        _id(),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('author', sa.String(), nullable=True),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
    )
    op.create_index('ix_preparation_books_title', 'preparation_books', ['title'])

    op.create_table('preparation_courses',
        _id(),
        sa.Column('platform', sa.String(), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('url', sa.String(), nullable=False),
    )
    op.create_index('ix_preparation_courses_title', 'preparation_courses', ['title'])

    op.create_table('subscribers',
        _id(),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        _created('subscription_date'),
    )
    op.create_index('ix_subscribers_email', 'subscribers', ['email'], unique=True)

    op.create_table('contact_submissions',
        _id(),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        _created('submitted_at'),
    )

    op.create_table('sponsored_ads',
        _id(),
        sa.Column('image_url', sa.String(), nullable=False),
        sa.Column('destination_url', sa.String(), nullable=False),
        sa.Column('placement', sa.String(), nullable=False, server_default='sidebar-top'),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('clicks', sa.Integer(), nullable=False, server_default='0'),
    )

    op.create_table('email_notifications',
        _id(),
        sa.Column('recipient', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('body', sa.Text(), nullable=True),
        _created('sent_at'),
    )

    op.create_table('custom_emails',
        _id(),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        _created('sent_at'),
    )

    op.create_table('email_templates',
        _id(),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('body', sa.Text(), nullable=True),
    )
    op.create_index('ix_email_templates_name', 'email_templates', ['name'])

    op.create_table('activity_logs',
        _id(),
        sa.Column('action', sa.String(), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        _created('timestamp'),
    )
    op.create_index('ix_activity_logs_timestamp', 'activity_logs', ['timestamp'])

    op.create_table('key_value_store',
        sa.Column('key_name', sa.String(length=100), primary_key=True),
        sa.Column('value', sa.Text(), nullable=True),
    )

    op.create_table('users',
        _id(),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('password_hash', sa.String(), nullable=False),
        _created('created_at'),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'])


def downgrade() -> None:
    """Downgrade schema - drop every portal table."""
    for table in (
        'users', 'key_value_store', 'activity_logs', 'email_templates', 'custom_emails',
        'email_notifications', 'sponsored_ads', 'contact_submissions', 'subscribers',
        'preparation_courses', 'preparation_books', 'upcoming_exams', 'quick_links',
        'breaking_news', 'content_posts', 'jobs',
    ):
        op.drop_table(table)
