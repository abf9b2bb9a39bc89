# app/api/pedidos/models/model_pedido_item.py
from decimal import Decimal
from typing import Optional, List

from sqlalchemy import Column, Integer, Numeric, ForeignKey, DateTime, JSON, CheckConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed

JSONType = JSON().with_variant(JSONB(), "postgresql")


class PedidoItemModel(Base):
    """
    Item de um pedido.

    O preço é congelado em `preco_unitario` no momento em que o item é resolvido
    e nunca é recalculado a partir do catálogo. `opcoes_snapshot` guarda os nomes
    dos complementos escolhidos e, para itens personalizados, o valor informado:

        {"customAcai": {"value": "25.00", "selectedComplements": [3, 7],
                        "complementNames": ["Leite em pó", "Granola"]}}
        {"complementNames": ["Granola"]}
    """
    __tablename__ = "pedidos_itens"
    __table_args__ = (
        CheckConstraint("quantidade >= 1", name="ck_pedidos_itens_quantidade_minima"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    pedido_id = Column(Integer, ForeignKey("pedidos.id", ondelete="CASCADE"), nullable=False, index=True)
    pedido = relationship("PedidoModel", back_populates="itens")

    # Nulo quando o produto foi excluído do catálogo (item órfão)
    produto_id = Column(Integer, ForeignKey("produtos.id", ondelete="SET NULL"), nullable=True)
    produto = relationship("ProdutoModel", back_populates="itens_pedido", lazy="joined")

    quantidade = Column(Integer, nullable=False, default=1)
    preco_unitario = Column(Numeric(18, 2), nullable=False)

    complemento_ids = Column(JSONType, nullable=True)
    opcoes_snapshot = Column(JSONType, nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)

    @property
    def is_orfao(self) -> bool:
        return self.produto_id is None

    @property
    def produto_nome(self) -> Optional[str]:
        return self.produto.nome if self.produto is not None else None

    @property
    def nomes_complementos(self) -> List[str]:
        """Nomes congelados dos complementos, qualquer que seja o formato do snapshot."""
        snapshot = self.opcoes_snapshot or {}
        if "complementNames" in snapshot:
            return list(snapshot.get("complementNames") or [])
        for valor in snapshot.values():
            if isinstance(valor, dict) and "complementNames" in valor:
                return list(valor.get("complementNames") or [])
        return []

    @property
    def preco_total(self) -> Decimal:
        return Decimal(str(self.preco_unitario or 0)) * (self.quantidade or 0)

    def __repr__(self):
        return f"<PedidoItem id={self.id} pedido={self.pedido_id} produto={self.produto_id} qtd={self.quantidade}>"
