"""Emergencies, case updates, saved welfares and doctor profiles

Revision ID: 8b2e4d6a1c55
Revises: 3f9a1c7d2b10
Create Date: 2026-10-19 14:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "8b2e4d6a1c55"
down_revision = "3f9a1c7d2b10"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "emergencies",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("reporter_name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("animal_type", sa.String(), nullable=False),
        sa.Column("condition", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("assigned_welfare_id", sa.Uuid(), nullable=True),
        sa.Column("medical_issue", sa.String(), nullable=True),
        sa.Column("estimated_cost", sa.Numeric(18, 2), nullable=True),
        sa.Column("treatment_plan", sa.Text(), nullable=True),
        sa.Column("case_id", sa.Uuid(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["assigned_welfare_id"],
            ["welfare_organizations.id"],
            ondelete="SET NULL",
        ),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_emergencies_status"), "emergencies", ["status"], unique=False
    )
    op.create_index(
        op.f("ix_emergencies_assigned_welfare_id"),
        "emergencies",
        ["assigned_welfare_id"],
        unique=False,
    )

    op.create_table(
        "case_updates",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("case_id", sa.Uuid(), nullable=False),
        sa.Column("welfare_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_success_story", sa.Boolean(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["case_id"], ["cases.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["welfare_id"], ["welfare_organizations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_case_updates_case_id"), "case_updates", ["case_id"], unique=False
    )
    op.create_index(
        op.f("ix_case_updates_welfare_id"),
        "case_updates",
        ["welfare_id"],
        unique=False,
    )

    op.create_table(
        "saved_welfares",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("donor_id", sa.Uuid(), nullable=False),
        sa.Column("welfare_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["donor_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["welfare_id"], ["welfare_organizations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("donor_id", "welfare_id", name="uq_saved_welfares_pair"),
    )
    op.create_index(
        op.f("ix_saved_welfares_donor_id"),
        "saved_welfares",
        ["donor_id"],
        unique=False,
    )

    op.create_table(
        "doctor_profiles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("welfare_id", sa.Uuid(), nullable=False),
        sa.Column("specialization", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["welfare_id"], ["welfare_organizations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index(
        op.f("ix_doctor_profiles_welfare_id"),
        "doctor_profiles",
        ["welfare_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_doctor_profiles_welfare_id"), table_name="doctor_profiles")
    op.drop_table("doctor_profiles")
    op.drop_index(op.f("ix_saved_welfares_donor_id"), table_name="saved_welfares")
    op.drop_table("saved_welfares")
    op.drop_index(op.f("ix_case_updates_welfare_id"), table_name="case_updates")
    op.drop_index(op.f("ix_case_updates_case_id"), table_name="case_updates")
    op.drop_table("case_updates")
    op.drop_index(
        op.f("ix_emergencies_assigned_welfare_id"), table_name="emergencies"
    )
    op.drop_index(op.f("ix_emergencies_status"), table_name="emergencies")
    op.drop_table("emergencies")
