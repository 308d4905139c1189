"""create estudantes

Revision ID: 0001_create_estudantes
Revises:
Create Date: 2024-06-23 20:44:11.000000

"""

from alembic import op
import sqlalchemy as sa


revision = "0001_create_estudantes"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "estudantes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("nome", sa.String(), nullable=False),
        sa.Column("ativo", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("nome", name="uq_estudantes_nome"),
    )


def downgrade():
    op.drop_table("estudantes")
