"""Initial schema: catalog, inquiries and saved plans

Revision ID: 0000_initial
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0000_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'packages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('name_hindi', sa.String(length=200), nullable=False),
        sa.Column('slug', sa.String(length=250), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('description_hindi', sa.Text(), nullable=False),
        sa.Column('size', sa.Integer(), nullable=False),
        sa.Column('bedrooms', sa.Integer(), nullable=False),
        sa.Column('bathrooms', sa.Integer(), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('style', sa.String(length=40), nullable=False),
        sa.Column('popular', sa.Boolean(), nullable=True),
        sa.Column('premium', sa.Boolean(), nullable=True),
        sa.Column('budget', sa.Boolean(), nullable=True),
        sa.Column('image_url', sa.String(length=600), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_packages_slug', 'packages', ['slug'], unique=True)
    op.create_index('ix_packages_style', 'packages', ['style'], unique=False)

    op.create_table(
        'materials',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('name_hindi', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=40), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('description_hindi', sa.Text(), nullable=False),
        sa.Column('premium', sa.Boolean(), nullable=True),
        sa.Column('image_url', sa.String(length=600), nullable=False),
    )
    op.create_index('ix_materials_category', 'materials', ['category'], unique=False)

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('title_hindi', sa.String(length=200), nullable=False),
        sa.Column('subtitle', sa.String(length=200), nullable=False),
        sa.Column('subtitle_hindi', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('description_hindi', sa.Text(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=True),
        sa.Column('location', sa.String(length=120), nullable=False),
        sa.Column('image_url', sa.String(length=600), nullable=False),
    )

    op.create_table(
        'inquiries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('full_name', sa.String(length=120), nullable=False),
        sa.Column('phone_number', sa.String(length=40), nullable=False),
        sa.Column('email', sa.String(length=200), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('custom_package', sa.JSON(), nullable=True),
        sa.Column('source', sa.String(length=20), nullable=False, server_default='contact'),
        sa.Column('email_status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('email_error', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_inquiries_email', 'inquiries', ['email'], unique=False)
    op.create_index('ix_inquiries_created_at', 'inquiries', ['created_at'], unique=False)

    op.create_table(
        'saved_plans',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('session_id', sa.String(length=64), nullable=False),
        sa.Column(
            'package_id',
            sa.Integer(),
            sa.ForeignKey('packages.id', name='fk_saved_plans_package_id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column('custom_package', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_saved_plans_session_id', 'saved_plans', ['session_id'], unique=False)


def downgrade():
    op.drop_index('ix_saved_plans_session_id', table_name='saved_plans')
    op.drop_table('saved_plans')

    op.drop_index('ix_inquiries_created_at', table_name='inquiries')
    op.drop_index('ix_inquiries_email', table_name='inquiries')
    op.drop_table('inquiries')

    op.drop_table('projects')

    op.drop_index('ix_materials_category', table_name='materials')
    op.drop_table('materials')

    op.drop_index('ix_packages_style', table_name='packages')
    op.drop_index('ix_packages_slug', table_name='packages')
    op.drop_table('packages')
