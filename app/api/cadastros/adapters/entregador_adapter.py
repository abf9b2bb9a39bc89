from typing import Optional

from sqlalchemy.orm import Session

from app.api.cadastros.contracts.entregador_contract import (
    IEntregadorContract,
    EntregadorDTO,
)
from app.api.cadastros.repositories.repo_entregadores import EntregadorRepository
from app.api.cadastros.models.model_entregador import EntregadorModel


class EntregadorAdapter(IEntregadorContract):
    """Implementação do contrato de entregadores baseada nos repositórios atuais."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = EntregadorRepository(db)

    def _to_entregador_dto(self, e: EntregadorModel) -> EntregadorDTO:
        return EntregadorDTO(
            id=e.id,
            nome=e.nome,
            telefone=e.telefone,
            ativo=bool(e.ativo),
        )

    def obter_entregador(self, entregador_id: int) -> Optional[EntregadorDTO]:
        e = self.repo.get(entregador_id)
        if not e:
            return None
        return self._to_entregador_dto(e)
