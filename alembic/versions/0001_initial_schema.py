"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

AVAILABILITY = ("Available", "Unavailable")


def upgrade() -> None:
    op.create_table(
        "drivers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("contact_number", sa.String(50), nullable=True),
        sa.Column("status", sa.Enum(*AVAILABILITY, name="driver_status"), nullable=False),
        sa.Column("schedule", sa.String(200), nullable=True),
        sa.Column("rating", sa.Numeric(3, 2), nullable=True),
        sa.Column("insurance_document", sa.String(200), nullable=True),
        sa.Column("driving_license_number", sa.String(50), nullable=True),
        sa.Column("preferred_payment_method", sa.String(50), nullable=True),
    )
    op.create_index("ix_drivers_name", "drivers", ["name"])

    op.create_table(
        "passengers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("contact_no", sa.String(50), nullable=True),
        sa.Column("email", sa.String(120), nullable=True),
        sa.Column("payment_details", sa.String(200), nullable=True),
    )
    op.create_index("ix_passengers_name", "passengers", ["name"])

    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("driver_id", sa.Integer(), sa.ForeignKey("drivers.id"), nullable=False),
        sa.Column("make", sa.String(80), nullable=False),
        sa.Column("license_plate", sa.String(20), nullable=False, unique=True),
        sa.Column("color", sa.String(40), nullable=False),
        sa.Column("vehicle_type", sa.String(40), nullable=False),
        sa.Column("insurance_policy_number", sa.String(80), nullable=False),
        sa.Column("child_seat_available", sa.Boolean(), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("status", sa.Enum(*AVAILABILITY, name="vehicle_status"), nullable=False),
    )
    op.create_index("ix_vehicles_driver_id", "vehicles", ["driver_id"])

    op.create_table(
        "rides",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("fare", sa.Integer(), nullable=False),
        sa.Column("status", sa.Enum("Pending", "Completed", name="ride_status"), nullable=False),
        sa.Column("pickup_location", sa.String(255), nullable=False),
        sa.Column("dropoff_location", sa.String(255), nullable=False),
        sa.Column("vehicle_id", sa.Integer(), sa.ForeignKey("vehicles.id"), nullable=False),
        sa.Column("passenger_id", sa.Integer(), sa.ForeignKey("passengers.id"), nullable=False),
        sa.Column("driver_id", sa.Integer(), sa.ForeignKey("drivers.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_rides_status", "rides", ["status"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("ride_id", sa.Integer(), sa.ForeignKey("rides.id"), nullable=False),
        sa.Column("payment_method", sa.String(50), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_status", sa.String(20), nullable=False),
        sa.Column("transaction_date", sa.Date(), nullable=False),
        sa.UniqueConstraint("ride_id", name="uniq_payment_per_ride"),
    )

    op.create_table(
        "feedback",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("ride_id", sa.Integer(), sa.ForeignKey("rides.id"), nullable=False),
        sa.Column("from_user_id", sa.Integer(), nullable=True),
        sa.Column("to_user_id", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comments", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_feedback_ride_id", "feedback", ["ride_id"])

    op.create_table(
        "maintenance",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("vehicle_id", sa.Integer(), sa.ForeignKey("vehicles.id"), nullable=False),
        sa.Column("performed_by", sa.String(100), nullable=True),
        sa.Column("cost", sa.Numeric(10, 2), nullable=True),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("date", sa.Date(), nullable=True),
    )
    op.create_index("ix_maintenance_vehicle_id", "maintenance", ["vehicle_id"])

    op.create_table(
        "promotions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("promo_code", sa.String(40), nullable=False),
        sa.Column("description", sa.String(300), nullable=True),
        sa.Column("eligibility_criteria", sa.String(300), nullable=True),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("discount_amount", sa.Numeric(10, 2), nullable=True),
    )

    op.create_table(
        "support_requests",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("ride_id", sa.Integer(), sa.ForeignKey("rides.id"), nullable=False),
        sa.Column("passenger_id", sa.Integer(), sa.ForeignKey("passengers.id"), nullable=False),
        sa.Column("issue_description", sa.String(1000), nullable=False),
        sa.Column("date_submitted", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("resolution_status", sa.String(20), nullable=False),
    )
    op.create_index("ix_support_requests_ride_id", "support_requests", ["ride_id"])


def downgrade() -> None:
    op.drop_table("support_requests")
    op.drop_table("promotions")
    op.drop_table("maintenance")
    op.drop_table("feedback")
    op.drop_table("payments")
    op.drop_table("rides")
    op.drop_table("vehicles")
    op.drop_table("passengers")
    op.drop_table("drivers")
