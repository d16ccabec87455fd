"""Create users and health_units tables."""

import sqlalchemy as sa

from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("open_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=320), nullable=True),
        sa.Column("login_method", sa.String(length=64), nullable=True),
        sa.Column(
            "role",
            sa.Enum("user", "admin", name="user_role", native_enum=False),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("last_signed_in", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_open_id", "users", ["open_id"], unique=True)

    op.create_table(
        "health_units",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "category",
            sa.Enum("ubs", "posto", "hospital", name="health_unit_category", native_enum=False),
            nullable=False,
        ),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("latitude", sa.String(length=50), nullable=False),
        sa.Column("longitude", sa.String(length=50), nullable=False),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column(
            "occupancy_level",
            sa.Enum("low", "medium", "high", "critical", name="occupancy_level", native_enum=False),
            nullable=False,
        ),
        sa.Column("average_wait_time", sa.Integer(), nullable=False),
        sa.Column("waiting_count", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_health_units_id", "health_units", ["id"])
    op.create_index("ix_health_units_category", "health_units", ["category"])


def downgrade() -> None:
    op.drop_index("ix_health_units_category", table_name="health_units")
    op.drop_index("ix_health_units_id", table_name="health_units")
    op.drop_table("health_units")
    op.drop_index("ix_users_open_id", table_name="users")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")
