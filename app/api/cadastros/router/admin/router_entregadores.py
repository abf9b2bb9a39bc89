from typing import List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.cadastros.services.service_entregadores import EntregadoresService
from app.api.cadastros.schemas.schema_entregador import (
    EntregadorOut,
    EntregadorCreate,
    EntregadorUpdate,
)
from app.utils.logger import logger
from app.core.admin_dependencies import require_admin

router = APIRouter(prefix="/api/cadastros/admin/entregadores", tags=["Admin - Cadastros - Entregadores"], dependencies=[Depends(require_admin)])

@router.get("", response_model=List[EntregadorOut])
def listar_entregadores(
    apenas_ativos: bool = Query(False, description="Retorna só os entregadores disponíveis para despacho"),
    db: Session = Depends(get_db),
):
    logger.info(f"[Entregadores] Listar - apenas_ativos={apenas_ativos}")
    svc = EntregadoresService(db)
    entregadores = svc.list()
    if apenas_ativos:
        return [e for e in entregadores if e.ativo]
    return entregadores

@router.get("/{entregador_id}", response_model=EntregadorOut)
def get_entregador(
    entregador_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    logger.info(f"[Entregadores] Get - id={entregador_id}")
    svc = EntregadoresService(db)
    return svc.get(entregador_id)

@router.post("", response_model=EntregadorOut, status_code=status.HTTP_201_CREATED)
def criar_entregador(
    payload: EntregadorCreate,
    db: Session = Depends(get_db),
):
    logger.info(f"[Entregadores] Criar - {payload.nome}")
    svc = EntregadoresService(db)
    return svc.create(payload)

@router.put("/{entregador_id}", response_model=EntregadorOut)
def atualizar_entregador(
    entregador_id: int,
    payload: EntregadorUpdate,
    db: Session = Depends(get_db),
):
    logger.info(f"[Entregadores] Update - id={entregador_id}")
    svc = EntregadoresService(db)
    return svc.update(entregador_id, payload)

@router.patch("/{entregador_id}/toggle", response_model=EntregadorOut)
def alternar_entregador(
    entregador_id: int,
    db: Session = Depends(get_db),
):
    logger.info(f"[Entregadores] Toggle - id={entregador_id}")
    svc = EntregadoresService(db)
    return svc.toggle(entregador_id)

@router.delete("/{entregador_id}", status_code=status.HTTP_204_NO_CONTENT)
def deletar_entregador(
    entregador_id: int,
    db: Session = Depends(get_db),
):
    logger.info(f"[Entregadores] Delete - id={entregador_id}")
    svc = EntregadoresService(db)
    svc.delete(entregador_id)
    return None
