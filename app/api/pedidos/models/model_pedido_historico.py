# app/api/pedidos/models/model_pedido_historico.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Enum as SAEnum, Index
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class TipoOperacaoPedido(str, enum.Enum):
    """Tipos de operações registradas no histórico do pedido."""
    PEDIDO_CRIADO = "PEDIDO_CRIADO"
    STATUS_ALTERADO = "STATUS_ALTERADO"
    ENTREGADOR_ASSOCIADO = "ENTREGADOR_ASSOCIADO"
    ITEM_ADICIONADO = "ITEM_ADICIONADO"
    ITEM_REMOVIDO = "ITEM_REMOVIDO"
    TOTAL_ALTERADO = "TOTAL_ALTERADO"
    TOTAL_RECALCULADO = "TOTAL_RECALCULADO"
    PEDIDO_CANCELADO = "PEDIDO_CANCELADO"


class PedidoHistoricoModel(Base):
    __tablename__ = "pedidos_historico"
    __table_args__ = (
        Index("idx_pedidos_historico_pedido", "pedido_id"),
        Index("idx_pedidos_historico_tipo_operacao", "tipo_operacao"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    pedido_id = Column(Integer, ForeignKey("pedidos.id", ondelete="CASCADE"), nullable=False)
    pedido = relationship("PedidoModel", back_populates="historico")

    tipo_operacao = Column(
        SAEnum(
            TipoOperacaoPedido,
            name="tipo_operacao_pedido_enum",
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    status_anterior = Column(String(30), nullable=True)
    status_novo = Column(String(30), nullable=True)
    descricao = Column(Text, nullable=True)

    # Quem executou a operação (admin ou o próprio cliente)
    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    def __repr__(self):
        return f"<PedidoHistorico pedido={self.pedido_id} operacao={self.tipo_operacao}>"
