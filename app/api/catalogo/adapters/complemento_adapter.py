from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from app.api.catalogo.contracts.complemento_contract import IComplementoContract, ComplementoDTO
from app.api.catalogo.repositories.repo_complemento import ComplementoRepository


class ComplementoAdapter(IComplementoContract):
    """Implementação do contrato de complementos."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ComplementoRepository(db)

    def buscar_por_ids(self, complemento_ids: List[int]) -> List[ComplementoDTO]:
        complementos = self.repo.buscar_por_ids(complemento_ids)
        return [
            ComplementoDTO(id=c.id, nome=c.nome, ativo=bool(c.ativo))
            for c in complementos
        ]
