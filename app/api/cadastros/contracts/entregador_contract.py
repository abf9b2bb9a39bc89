from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class EntregadorDTO(BaseModel):
    """DTO de entregador para comunicação entre contextos."""
    id: int
    nome: str
    telefone: Optional[str] = None
    ativo: bool = True


class IEntregadorContract(ABC):
    """Contrato para acesso a entregadores do contexto Cadastros."""

    @abstractmethod
    def obter_entregador(self, entregador_id: int) -> Optional[EntregadorDTO]:
        raise NotImplementedError
