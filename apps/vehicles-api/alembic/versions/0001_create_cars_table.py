"""create cars table

Revision ID: 0001_create_cars
Revises:
Create Date: 2026-10-19 09:00:00
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_create_cars"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "cars",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("condition", sa.Enum("NEW", "USED", name="car_condition"), nullable=False),
        sa.Column("body", sa.String(64), nullable=False),
        sa.Column("model", sa.String(128), nullable=False),
        sa.Column("manufacturer_code", sa.Integer(), nullable=False),
        sa.Column("manufacturer_name", sa.String(128), nullable=True),
        sa.Column("number_of_doors", sa.Integer(), nullable=True),
        sa.Column("fuel_type", sa.String(64), nullable=True),
        sa.Column("engine", sa.String(64), nullable=True),
        sa.Column("mileage", sa.Integer(), nullable=True),
        sa.Column("model_year", sa.Integer(), nullable=True),
        sa.Column("production_year", sa.Integer(), nullable=True),
        sa.Column("external_color", sa.String(64), nullable=True),
        sa.Column("lat", sa.Float(), nullable=False),
        sa.Column("lon", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_cars_manufacturer_code", "cars", ["manufacturer_code"])


def downgrade() -> None:
    op.drop_index("ix_cars_manufacturer_code", table_name="cars")
    op.drop_table("cars")
    sa.Enum(name="car_condition").drop(op.get_bind(), checkfirst=True)
