"""Add versao/total_manual to pedidos and entregador_id SET NULL

Revision ID: 20261012_add_versao_total_manual_pedidos
Revises: 
Create Date: 2026-10-12 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261012_add_versao_total_manual_pedidos"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Controle de concorrência otimista: toda alteração incrementa a versão
    op.add_column(
        "pedidos",
        sa.Column("versao", sa.Integer, nullable=False, server_default="1"),
    )
    # Total sobrescrito pelo admin (deixa de ser recalculado até a próxima edição de itens)
    op.add_column(
        "pedidos",
        sa.Column("total_manual", sa.Boolean, nullable=False, server_default=sa.text("false")),
    )

    # Excluir um entregador não pode apagar nem bloquear o histórico de pedidos
    op.drop_constraint("pedidos_entregador_id_fkey", "pedidos", type_="foreignkey")
    op.create_foreign_key(
        "pedidos_entregador_id_fkey",
        "pedidos",
        "entregadores",
        ["entregador_id"],
        ["id"],
        ondelete="SET NULL",
    )


def downgrade() -> None:
    op.drop_constraint("pedidos_entregador_id_fkey", "pedidos", type_="foreignkey")
    op.create_foreign_key(
        "pedidos_entregador_id_fkey",
        "pedidos",
        "entregadores",
        ["entregador_id"],
        ["id"],
    )
    op.drop_column("pedidos", "total_manual")
    op.drop_column("pedidos", "versao")
