from abc import ABC, abstractmethod
from typing import Optional
from decimal import Decimal

from pydantic import BaseModel


class ProdutoDTO(BaseModel):
    """DTO de produto para comunicação entre contextos."""
    id: int
    nome: str
    preco: Decimal
    ativo: bool
    tipo_personalizado: Optional[str] = None


class IProdutoContract(ABC):
    """Contrato para acesso a produtos do contexto Catalogo."""

    @abstractmethod
    def obter_produto(self, produto_id: int) -> Optional[ProdutoDTO]:
        """Obtém o produto pelo id (None quando não existe)."""
        raise NotImplementedError

    @abstractmethod
    def obter_produto_personalizado(self, tipo: str) -> Optional[ProdutoDTO]:
        """Obtém o produto base de uma categoria personalizada (customAcai, customSorvete, customProduct)."""
        raise NotImplementedError
