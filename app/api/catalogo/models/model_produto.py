import enum

from sqlalchemy import Column, Integer, String, Boolean, Numeric, DateTime, Enum as SAEnum
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class TipoItemPersonalizado(str, enum.Enum):
    """Categorias de item personalizado (montado pelo cliente com preço próprio)."""
    ACAI = "customAcai"
    SORVETE = "customSorvete"
    PRODUTO = "customProduct"


class ProdutoModel(Base):
    __tablename__ = "produtos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(120), nullable=False)
    descricao = Column(String(255), nullable=True)
    preco = Column(Numeric(18, 2), nullable=False, default=0)
    ativo = Column(Boolean, nullable=False, default=True)

    # Preenchido apenas no produto "base" de cada categoria personalizada
    tipo_personalizado = Column(
        SAEnum(
            TipoItemPersonalizado,
            name="tipo_item_personalizado_enum",
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=True,
        unique=True,
    )

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    # Ao excluir o produto os itens de pedido ficam órfãos (produto_id nulo), com o preço congelado
    itens_pedido = relationship("PedidoItemModel", back_populates="produto")
