"""Initial schema: users, catalog, shopping carts

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa

revision = '001'
down_revision = None
branch_labels = None
depends_on = None

BRANDS = ('YONEX', 'VICTOR', 'LINING', 'MIZUNO', 'KUMPOO', 'APACS', 'KAWASAKI', 'FELET', 'VS', 'OTHER')
PRODUCT_TYPES = ('RACKET', 'SHOES', 'SHUTTLECOCK', 'UNKNOWN')


def upgrade():
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('mail', sa.String(100), nullable=False),
        sa.Column('phone_number', sa.String(20), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('role', sa.Enum('CUSTOMER', 'ADMIN', name='user_role'), nullable=False),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_users_user_id', 'users', ['user_id'])
    op.create_index('ix_users_mail', 'users', ['mail'], unique=True)

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_name', sa.String(255), nullable=False),
        sa.Column('image_url', sa.String(500)),
        sa.Column('price', sa.BigInteger(), nullable=False),
        sa.Column('brand', sa.Enum(*BRANDS, name='brand'), nullable=False),
        sa.Column('status', sa.String(50)),
        sa.Column('sales', sa.Integer()),
        sa.Column('stock', sa.Integer()),
        sa.Column('available_location', sa.JSON()),
        sa.Column('description', sa.Text()),
        sa.Column('product_type', sa.Enum(*PRODUCT_TYPES, name='product_type'), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_products_id', 'products', ['id'])
    op.create_index('ix_products_product_name', 'products', ['product_name'])
    op.create_index('ix_products_brand', 'products', ['brand'])

    op.create_table(
        'rackets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('balance', sa.Enum('HEAD_HEAVY', 'EVEN', 'HEAD_LIGHT', name='racket_balance'), nullable=False),
        sa.Column('stiffness', sa.Enum('FLEXIBLE', 'MEDIUM', 'STIFF', 'EXTRA_STIFF', name='racket_stiffness'), nullable=False),
        sa.Column('weight', sa.String(20)),
        sa.Column('length', sa.String(50)),
        sa.Column('player_level', sa.String(100)),
        sa.Column('playing_style', sa.String(100)),
        sa.Column('line', sa.String(100)),
        sa.Column('technology', sa.Text()),
        sa.Column('max_tension', sa.String(50)),
    )
    op.create_index('ix_rackets_id', 'rackets', ['id'])

    op.create_table(
        'shoes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('color', sa.String(100)),
        sa.Column('technology', sa.Text()),
    )
    op.create_index('ix_shoes_id', 'shoes', ['id'])

    op.create_table(
        'shoe_sizes',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('shoes_id', sa.Integer(), sa.ForeignKey('shoes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('kind', sa.Enum('SIZE', 'AVAILABLE', name='shoe_size_kind'), nullable=False),
        sa.Column('value', sa.String(10), nullable=False),
        sa.UniqueConstraint('shoes_id', 'kind', 'value', name='uq_shoe_sizes_shoes_kind_value'),
    )
    op.create_index('ix_shoe_sizes_id', 'shoe_sizes', ['id'])
    op.create_index('ix_shoe_sizes_shoes_id', 'shoe_sizes', ['shoes_id'])

    op.create_table(
        'shuttlecocks',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('shuttle_type', sa.String(100)),
        sa.Column('speed', sa.Integer()),
        sa.Column('no_per_tube', sa.Integer()),
    )
    op.create_index('ix_shuttlecocks_id', 'shuttlecocks', ['id'])

    op.create_table(
        'shopping_carts',
        sa.Column('cart_id', sa.Integer(), primary_key=True),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_shopping_carts_cart_id', 'shopping_carts', ['cart_id'])

    op.create_table(
        'cart_items',
        sa.Column('item_id', sa.Integer(), primary_key=True),
        sa.Column('cart_id', sa.Integer(), sa.ForeignKey('shopping_carts.cart_id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('added_at', sa.TIMESTAMP(), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.UniqueConstraint('cart_id', 'product_id', name='uq_cart_items_cart_product'),
        sa.CheckConstraint('quantity > 0', name='ck_cart_items_quantity_positive'),
    )
    op.create_index('ix_cart_items_item_id', 'cart_items', ['item_id'])
    op.create_index('ix_cart_items_cart_id', 'cart_items', ['cart_id'])


def downgrade():
    op.drop_table('cart_items')
    op.drop_table('shopping_carts')
    op.drop_table('shuttlecocks')
    op.drop_table('shoe_sizes')
    op.drop_table('shoes')
    op.drop_table('rackets')
    op.drop_table('products')
    op.drop_table('users')
