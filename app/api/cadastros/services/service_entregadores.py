from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.cadastros.models.model_entregador import EntregadorModel
from app.api.cadastros.repositories.repo_entregadores import EntregadorRepository
from app.api.cadastros.schemas.schema_entregador import (
    EntregadorCreate,
    EntregadorOut,
    EntregadorUpdate,
)
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.logger import logger
from app.utils.telefone import normalizar_telefone


class EntregadoresService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = EntregadorRepository(db)

    def _to_out(self, obj: EntregadorModel, total_entregas: int = 0) -> EntregadorOut:
        out = EntregadorOut.model_validate(obj)
        out.total_entregas = total_entregas
        return out

    def _validar_telefone(self, telefone: Optional[str], *, ignorar_id: Optional[int] = None) -> str:
        normalizado = normalizar_telefone(telefone)
        if not normalizado:
            raise ValidationError("Telefone do entregador é obrigatório", field="telefone", code="TELEFONE_OBRIGATORIO")
        existente = self.repo.get_by_telefone(normalizado)
        if existente and existente.id != ignorar_id:
            raise ValidationError(
                "Já existe um entregador com este telefone",
                field="telefone",
                code="TELEFONE_DUPLICADO",
            )
        return normalizado

    def _get_or_404(self, id_: int) -> EntregadorModel:
        obj = self.repo.get(id_)
        if not obj:
            raise NotFoundError(f"Entregador {id_} não encontrado", code="ENTREGADOR_NAO_ENCONTRADO")
        return obj

    def list(self) -> List[EntregadorOut]:
        entregadores = self.repo.list()
        totais = self.repo.total_entregas_por_entregador([e.id for e in entregadores])
        return [self._to_out(e, totais.get(e.id, 0)) for e in entregadores]

    def get(self, id_: int) -> EntregadorOut:
        obj = self._get_or_404(id_)
        totais = self.repo.total_entregas_por_entregador([obj.id])
        return self._to_out(obj, totais.get(obj.id, 0))

    def create(self, data: EntregadorCreate) -> EntregadorOut:
        telefone = self._validar_telefone(data.telefone)
        obj = self.repo.create(
            nome=data.nome,
            telefone=telefone,
            email=data.email or None,
            ativo=data.ativo,
        )
        logger.info(f"[EntregadoresService] Entregador criado: id={obj.id} nome={obj.nome}")
        return self._to_out(obj)

    def update(self, id_: int, data: EntregadorUpdate) -> EntregadorOut:
        obj = self._get_or_404(id_)
        campos = data.model_dump(exclude_unset=True)
        if "nome" in campos and not campos["nome"]:
            raise ValidationError("Nome do entregador é obrigatório", field="nome", code="NOME_OBRIGATORIO")
        if "telefone" in campos:
            campos["telefone"] = self._validar_telefone(campos["telefone"], ignorar_id=obj.id)
        if "email" in campos:
            campos["email"] = campos["email"] or None
        if "ativo" in campos and campos["ativo"] is None:
            campos.pop("ativo")
        obj = self.repo.update(obj, **campos)
        logger.info(f"[EntregadoresService] Entregador atualizado: id={obj.id} campos={list(campos)}")
        return self.get(obj.id)

    def toggle(self, id_: int) -> EntregadorOut:
        """Ativa/desativa o entregador. Inativos não aparecem como opção ao despachar pedidos."""
        obj = self._get_or_404(id_)
        obj = self.repo.update(obj, ativo=not obj.ativo)
        logger.info(f"[EntregadoresService] Entregador {obj.id} ativo={obj.ativo}")
        return self.get(obj.id)

    def delete(self, id_: int) -> None:
        obj = self._get_or_404(id_)
        self.repo.delete(obj)
        logger.info(f"[EntregadoresService] Entregador removido: id={id_}")
