from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel


class ComplementoDTO(BaseModel):
    """DTO de complemento para comunicação entre contextos."""
    id: int
    nome: str
    ativo: bool


class IComplementoContract(ABC):
    """Contrato para acesso a complementos."""

    @abstractmethod
    def buscar_por_ids(self, complemento_ids: List[int]) -> List[ComplementoDTO]:
        """Retorna os complementos encontrados para os IDs (IDs inexistentes são omitidos)."""
        raise NotImplementedError
