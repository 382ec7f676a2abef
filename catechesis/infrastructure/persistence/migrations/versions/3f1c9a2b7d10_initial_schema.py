"""initial_schema

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema - parishes, users, curriculum, enrollments and attendance."""

    op.create_table(
        "parish",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_parish_name"),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["parish.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("username", name="uq_app_user_username"),
        sa.CheckConstraint(
            "(role = 'admin' AND tenant_id IS NULL) OR (role <> 'admin' AND tenant_id IS NOT NULL)",
            name="ck_app_user_role_tenant",
        ),
    )
    op.create_index("ix_app_user_tenant_id", "app_user", ["tenant_id"])

    op.create_table(
        "level",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("sort_order", name="uq_level_sort_order"),
        sa.CheckConstraint("sort_order > 0", name="ck_level_order_positive"),
    )

    op.create_table(
        "class_group",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("level_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("period", sa.String(length=9), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["parish.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["level_id"], ["level.id"], ondelete="RESTRICT"),
        sa.UniqueConstraint(
            "tenant_id", "name", "period", name="uq_group_tenant_name_period"
        ),
    )
    op.create_index("ix_class_group_tenant_id", "class_group", ["tenant_id"])
    op.create_index("ix_class_group_level_id", "class_group", ["level_id"])

    op.create_table(
        "person",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("first_names", sa.String(), nullable=False),
        sa.Column("last_names", sa.String(), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("document_id", sa.String(), nullable=False),
        sa.Column("special_case", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("document_id", name="uq_person_document_id"),
    )

    op.create_table(
        "baptism_record",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("person_id", sa.String(), nullable=False),
        sa.Column("parish_name", sa.String(), nullable=False),
        sa.Column("baptized_on", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("person_id", name="uq_baptism_record_person_id"),
    )

    op.create_table(
        "legal_representative",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("person_id", sa.String(), nullable=False),
        sa.Column("names", sa.String(), nullable=False),
        sa.Column("relationship", sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_legal_representative_person_id", "legal_representative", ["person_id"]
    )

    op.create_table(
        "certificate",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("person_id", sa.String(), nullable=False),
        sa.Column("level_id", sa.String(), nullable=False),
        sa.Column("approved", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("issued_at", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["level_id"], ["level.id"], ondelete="RESTRICT"),
    )
    op.create_index("ix_certificate_person_id", "certificate", ["person_id"])

    op.create_table(
        "enrollment",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("person_id", sa.String(), nullable=False),
        sa.Column("group_id", sa.String(), nullable=False),
        sa.Column(
            "enrolled_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["parish.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["group_id"], ["class_group.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("person_id", "group_id", name="uq_enrollment_person_group"),
    )
    op.create_index("ix_enrollment_tenant_id", "enrollment", ["tenant_id"])
    op.create_index("ix_enrollment_person_id", "enrollment", ["person_id"])
    op.create_index("ix_enrollment_group_id", "enrollment", ["group_id"])

    op.create_table(
        "enrollment_transfer",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("enrollment_id", sa.String(), nullable=False),
        sa.Column("from_group_id", sa.String(), nullable=False),
        sa.Column("to_group_id", sa.String(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column(
            "transferred_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("transferred_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["enrollment_id"], ["enrollment.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["transferred_by"], ["app_user.id"], ondelete="SET NULL"),
    )
    op.create_index(
        "ix_enrollment_transfer_enrollment_id", "enrollment_transfer", ["enrollment_id"]
    )

    op.create_table(
        "attendance_record",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("enrollment_id", sa.String(), nullable=False),
        sa.Column("attended_on", sa.Date(), nullable=False),
        sa.Column("present", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["enrollment_id"], ["enrollment.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "enrollment_id", "attended_on", name="uq_attendance_enrollment_day"
        ),
    )
    op.create_index(
        "ix_attendance_record_enrollment_id", "attendance_record", ["enrollment_id"]
    )


def downgrade() -> None:
    """Downgrade schema - drop all tables in reverse dependency order."""
    op.drop_table("attendance_record")
    op.drop_table("enrollment_transfer")
    op.drop_table("enrollment")
    op.drop_table("certificate")
    op.drop_table("legal_representative")
    op.drop_table("baptism_record")
    op.drop_table("person")
    op.drop_table("class_group")
    op.drop_table("level")
    op.drop_table("app_user")
    op.drop_table("parish")
