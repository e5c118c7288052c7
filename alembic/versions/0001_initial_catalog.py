"""users, vehicle_brands, categories, category_vehicle_brands, projects, contact_messages, settings

Revision ID: 0001_initial_catalog
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_initial_catalog"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(updated_only: bool = False) -> list:
    cols = []
    if not updated_only:
        cols.append(sa.Column("createdAt", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()))
    cols.append(sa.Column("updatedAt", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()))
    return cols


def _content_columns() -> list:
    """Columns shared by vehicle_brands and categories."""
    return [
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("longDescription", sa.Text(), nullable=True),
        sa.Column("contentDescription", sa.Text(), nullable=True),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column("heroImage", sa.String(length=500), nullable=True),
        sa.Column("gallery", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("metaTitle", sa.String(length=255), nullable=True),
        sa.Column("metaDescription", sa.Text(), nullable=True),
        sa.Column("sortOrder", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=150), nullable=True),
        sa.Column("role", sa.Enum("ADMIN", "EDITOR", name="rolename"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "vehicle_brands",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("slug", sa.String(length=150), nullable=False),
        sa.Column("fullName", sa.String(length=255), nullable=True),
        sa.Column("type", sa.String(length=20), nullable=False, server_default="truck"),
        sa.Column("models", sa.Text(), nullable=False, server_default="[]"),
        *_content_columns(),
        *_timestamps(),
    )
    op.create_index("ix_vehicle_brands_slug", "vehicle_brands", ["slug"], unique=True)

    op.create_table(
        "categories",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("slug", sa.String(length=150), nullable=False),
        sa.Column("icon", sa.String(length=100), nullable=True),
        sa.Column("color", sa.String(length=20), nullable=True, server_default="#3b82f6"),
        sa.Column("features", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("benefits", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("specifications", sa.Text(), nullable=False, server_default="[]"),
        *_content_columns(),
        *_timestamps(),
    )
    op.create_index("ix_categories_slug", "categories", ["slug"], unique=True)

    op.create_table(
        "category_vehicle_brands",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("categoryId", sa.String(length=32),
                  sa.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False),
        sa.Column("vehicleBrandId", sa.String(length=32),
                  sa.ForeignKey("vehicle_brands.id", ondelete="CASCADE"), nullable=False),
        sa.UniqueConstraint("categoryId", "vehicleBrandId", name="uq_category_vehicle_brand"),
    )
    op.create_index("ix_category_vehicle_brands_categoryId", "category_vehicle_brands", ["categoryId"])
    op.create_index("ix_category_vehicle_brands_vehicleBrandId", "category_vehicle_brands", ["vehicleBrandId"])

    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("images", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("thumbnail", sa.String(length=500), nullable=True),
        sa.Column("categoryId", sa.String(length=32), sa.ForeignKey("categories.id"), nullable=True),
        sa.Column("vehicleBrand", sa.String(length=150), nullable=True),
        sa.Column("vehicleModel", sa.String(length=150), nullable=True),
        sa.Column("year", sa.String(length=10), nullable=True),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("metaTitle", sa.String(length=255), nullable=True),
        sa.Column("metaDescription", sa.Text(), nullable=True),
        sa.Column("authorId", sa.String(length=32), sa.ForeignKey("users.id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_projects_slug", "projects", ["slug"], unique=True)
    op.create_index("ix_projects_categoryId", "projects", ["categoryId"])

    op.create_table(
        "contact_messages",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("subject", sa.String(length=255), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_contact_messages_read", "contact_messages", ["read"])

    op.create_table(
        "settings",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("key", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Text(), nullable=False, server_default=""),
        *_timestamps(updated_only=True),
    )
    op.create_index("ix_settings_key", "settings", ["key"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_settings_key", table_name="settings")
    op.drop_table("settings")
    op.drop_index("ix_contact_messages_read", table_name="contact_messages")
    op.drop_table("contact_messages")
    op.drop_index("ix_projects_categoryId", table_name="projects")
    op.drop_index("ix_projects_slug", table_name="projects")
    op.drop_table("projects")
    op.drop_index("ix_category_vehicle_brands_vehicleBrandId", table_name="category_vehicle_brands")
    op.drop_index("ix_category_vehicle_brands_categoryId", table_name="category_vehicle_brands")
    op.drop_table("category_vehicle_brands")
    op.drop_index("ix_categories_slug", table_name="categories")
    op.drop_table("categories")
    op.drop_index("ix_vehicle_brands_slug", table_name="vehicle_brands")
    op.drop_table("vehicle_brands")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    sa.Enum(name="rolename").drop(op.get_bind(), checkfirst=True)
