# app/api/pedidos/models/model_pedido.py
from decimal import Decimal
from typing import Optional
import enum

from sqlalchemy import (
    Column, Integer, String, DateTime, ForeignKey, Numeric, Enum as SAEnum,
    Index, Boolean, CheckConstraint,
)
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class StatusPedido(str, enum.Enum):
    """Status possíveis para um pedido.

    Fluxo:
    - pending_payment -> being_prepared
    - being_prepared -> on_the_way (delivery) | ready_for_pickup (pickup)
    - on_the_way | ready_for_pickup -> delivered
    - delivered e canceled são terminais
    """
    PENDING_PAYMENT = "pending_payment"
    BEING_PREPARED = "being_prepared"
    ON_THE_WAY = "on_the_way"
    READY_FOR_PICKUP = "ready_for_pickup"
    DELIVERED = "delivered"
    CANCELED = "canceled"


class TipoEntrega(str, enum.Enum):
    """Modalidade do pedido."""
    DELIVERY = "delivery"
    PICKUP = "pickup"


class MetodoPagamento(str, enum.Enum):
    CREDIT_CARD = "CREDIT_CARD"
    PIX = "PIX"
    CASH_ON_DELIVERY = "CASH_ON_DELIVERY"


STATUS_TERMINAIS = frozenset({StatusPedido.DELIVERED, StatusPedido.CANCELED})

STATUS_DESCRICAO = {
    StatusPedido.PENDING_PAYMENT: "Aguardando pagamento",
    StatusPedido.BEING_PREPARED: "Em preparo",
    StatusPedido.ON_THE_WAY: "Saiu para entrega",
    StatusPedido.READY_FOR_PICKUP: "Pronto para retirada",
    StatusPedido.DELIVERED: "Entregue",
    StatusPedido.CANCELED: "Cancelado",
}


def _enum_column(enum_cls, name: str) -> SAEnum:
    # Armazena o value (ex.: "pending_payment") como VARCHAR, portável entre Postgres e SQLite
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        values_callable=lambda e: [m.value for m in e],
        validate_strings=True,
    )


class PedidoModel(Base):
    __tablename__ = "pedidos"
    __table_args__ = (
        Index("idx_pedidos_status", "status"),
        Index("idx_pedidos_usuario", "usuario_id"),
        Index("idx_pedidos_created_at", "created_at"),
        CheckConstraint("valor_total >= 0", name="ck_pedidos_valor_total_nao_negativo"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="RESTRICT"), nullable=False)
    usuario = relationship("UsuarioModel", lazy="select")

    status = Column(
        _enum_column(StatusPedido, "pedido_status_enum"),
        nullable=False,
        default=StatusPedido.PENDING_PAYMENT,
    )
    tipo_entrega = Column(_enum_column(TipoEntrega, "tipo_entrega_enum"), nullable=False)
    metodo_pagamento = Column(_enum_column(MetodoPagamento, "metodo_pagamento_enum"), nullable=False)

    # Valores
    valor_total = Column(Numeric(18, 2), nullable=False, default=0)
    taxa_entrega = Column(Numeric(18, 2), nullable=False, default=0)
    # True enquanto valor_total contém um valor sobrescrito manualmente pelo admin
    total_manual = Column(Boolean, nullable=False, default=False)

    # Troco (apenas dinheiro na entrega)
    precisa_troco = Column(Boolean, nullable=False, default=False)
    valor_troco = Column(Numeric(18, 2), nullable=True)

    observacoes = Column(String(500), nullable=True)

    # Entregador (apenas delivery, definido ao sair para entrega)
    entregador_id = Column(Integer, ForeignKey("entregadores.id", ondelete="SET NULL"), nullable=True)
    entregador = relationship("EntregadorModel", back_populates="pedidos", lazy="select")

    # Endereço: referência + snapshot capturado na criação
    endereco_id = Column(Integer, ForeignKey("enderecos.id", ondelete="SET NULL"), nullable=True)
    entrega_rua = Column(String(120), nullable=True)
    entrega_numero = Column(String(10), nullable=True)
    entrega_complemento = Column(String(50), nullable=True)
    entrega_bairro = Column(String(60), nullable=True)
    entrega_telefone = Column(String(20), nullable=True)

    # Incrementado a cada alteração confirmada (controle de concorrência otimista)
    versao = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    itens = relationship(
        "PedidoItemModel",
        back_populates="pedido",
        cascade="all, delete-orphan",
        order_by="PedidoItemModel.id",
    )
    historico = relationship(
        "PedidoHistoricoModel",
        back_populates="pedido",
        cascade="all, delete-orphan",
        order_by="PedidoHistoricoModel.id",
    )

    @property
    def is_terminal(self) -> bool:
        return self.status in STATUS_TERMINAIS

    @property
    def status_descricao(self) -> str:
        return STATUS_DESCRICAO.get(self.status, str(self.status))

    @property
    def troco(self) -> Optional[Decimal]:
        """Valor do troco a devolver ao cliente (None quando não precisa)."""
        if not self.precisa_troco or self.valor_troco is None:
            return None
        return Decimal(str(self.valor_troco)) - Decimal(str(self.valor_total or 0))

    def __repr__(self):
        return f"<Pedido id={self.id} status={self.status} tipo={self.tipo_entrega} total={self.valor_total}>"
