"""create tms core tables

Revision ID: 3f1a9c2b7d10
Revises:
Create Date: 2026-10-19 10:12:31.204117
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f1a9c2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    建立库位 / 托盘 / 放置规则 / 消息 / 运输单 核心表。
    表名、列名沿用既有数据库（全大写），不要随意改。
    """
    op.create_table(
        "LOCATION_TYPE",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("TYPE", sa.String(64), nullable=False, unique=True),
        sa.Column("DESCRIPTION", sa.String(255), nullable=True),
    )
    op.create_table(
        "LOCATION_GROUP",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("NAME", sa.String(64), nullable=False, unique=True),
        sa.Column("DESCRIPTION", sa.String(255), nullable=True),
        sa.Column("PARENT", sa.Integer(), sa.ForeignKey("LOCATION_GROUP.ID"), nullable=True),
    )
    op.create_table(
        "LOCATION",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("AREA", sa.String(20), nullable=False),
        sa.Column("AISLE", sa.String(20), nullable=False),
        sa.Column("X", sa.String(20), nullable=False),
        sa.Column("Y", sa.String(20), nullable=False),
        sa.Column("Z", sa.String(20), nullable=False),
        sa.Column("DESCRIPTION", sa.String(255), nullable=True),
        sa.Column("NO_MAX_TRANSPORT_UNITS", sa.Integer(), nullable=False),
        sa.Column("LOCATION_TYPE", sa.Integer(), sa.ForeignKey("LOCATION_TYPE.ID"), nullable=True),
        sa.Column("LOCATION_GROUP", sa.Integer(), sa.ForeignKey("LOCATION_GROUP.ID"), nullable=True),
        sa.UniqueConstraint("AREA", "AISLE", "X", "Y", "Z", name="uq_location_id_parts"),
    )
    op.create_index("ix_location_group", "LOCATION", ["LOCATION_GROUP"])

    op.create_table(
        "TRANSPORT_UNIT_TYPE",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("TYPE", sa.String(64), nullable=False, unique=True),
        sa.Column("DESCRIPTION", sa.String(255), nullable=True),
    )
    op.create_table(
        "TRANSPORT_UNIT",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("BARCODE", sa.String(64), nullable=False, unique=True),
        sa.Column(
            "TRANSPORT_UNIT_TYPE",
            sa.Integer(),
            sa.ForeignKey("TRANSPORT_UNIT_TYPE.ID"),
            nullable=True,
        ),
        sa.Column("ACTUAL_LOCATION", sa.Integer(), sa.ForeignKey("LOCATION.ID"), nullable=True),
        sa.Column("WEIGHT", sa.Numeric(15, 3), nullable=True),
        sa.Column("WEIGHT_UNIT", sa.String(8), nullable=True),
    )
    op.create_table(
        "TYPE_PLACING_RULE",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "TRANSPORT_UNIT_TYPE",
            sa.Integer(),
            sa.ForeignKey("TRANSPORT_UNIT_TYPE.ID"),
            nullable=True,
        ),
        sa.Column("PRIVILEGE_LEVEL", sa.Integer(), nullable=False),
        sa.Column(
            "ALLOWED_LOCATION_TYPE",
            sa.Integer(),
            sa.ForeignKey("LOCATION_TYPE.ID"),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "TRANSPORT_UNIT_TYPE",
            "PRIVILEGE_LEVEL",
            "ALLOWED_LOCATION_TYPE",
            name="uq_type_placing_rule",
        ),
    )
    op.create_table(
        "MESSAGE",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("MESSAGE_NO", sa.Integer(), nullable=False),
        sa.Column("MESSAGE_TEXT", sa.String(1024), nullable=True),
        sa.Column("CREATED", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_MESSAGE_MESSAGE_NO", "MESSAGE", ["MESSAGE_NO"])

    op.create_table(
        "TRANSPORT_ORDER",
        sa.Column("ID", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("TRANSPORT_UNIT", sa.Integer(), sa.ForeignKey("TRANSPORT_UNIT.ID"), nullable=True),
        sa.Column("PRIORITY", sa.SmallInteger(), nullable=False),
        sa.Column("CREATION_DATE", sa.DateTime(timezone=True), nullable=False),
        sa.Column("DATE_UPDATED", sa.DateTime(timezone=True), nullable=True),
        sa.Column("START_DATE", sa.DateTime(timezone=True), nullable=True),
        sa.Column("END_DATE", sa.DateTime(timezone=True), nullable=True),
        sa.Column("STATE", sa.String(16), nullable=False),
        sa.Column("SOURCE_LOCATION", sa.Integer(), sa.ForeignKey("LOCATION.ID"), nullable=True),
        sa.Column("TARGET_LOCATION", sa.Integer(), sa.ForeignKey("LOCATION.ID"), nullable=True),
        sa.Column(
            "TARGET_LOCATION_GROUP",
            sa.Integer(),
            sa.ForeignKey("LOCATION_GROUP.ID"),
            nullable=True,
        ),
        sa.Column("OCCURRED", sa.DateTime(timezone=True), nullable=True),
        sa.Column("MESSAGE_NO", sa.Integer(), nullable=True),
        sa.Column("MESSAGE", sa.String(1024), nullable=True),
        sa.Column("C_VERSION", sa.Integer(), nullable=False),
    )
    op.create_index("ix_transport_order_state", "TRANSPORT_ORDER", ["STATE"])


def downgrade() -> None:
    op.drop_index("ix_transport_order_state", table_name="TRANSPORT_ORDER")
    op.drop_table("TRANSPORT_ORDER")
    op.drop_index("ix_MESSAGE_MESSAGE_NO", table_name="MESSAGE")
    op.drop_table("MESSAGE")
    op.drop_table("TYPE_PLACING_RULE")
    op.drop_table("TRANSPORT_UNIT")
    op.drop_table("TRANSPORT_UNIT_TYPE")
    op.drop_index("ix_location_group", table_name="LOCATION")
    op.drop_table("LOCATION")
    op.drop_table("LOCATION_GROUP")
    op.drop_table("LOCATION_TYPE")
