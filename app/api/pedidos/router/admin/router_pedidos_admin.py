"""
Router de pedidos para o painel admin.
Listagem, criação em nome do cliente, avanço de status, cancelamento e edição de itens/total.
"""
from datetime import date
from typing import Optional, List

from fastapi import APIRouter, Body, Depends, Path, Query, status

from app.api.cadastros.models.model_usuario import UsuarioModel
from app.api.pedidos.models.model_pedido import StatusPedido, TipoEntrega
from app.api.pedidos.schemas import (
    ContagemPendentesResponse,
    PedidoAdicionarItemRequest,
    PedidoAvancarStatusRequest,
    PedidoCancelarRequest,
    PedidoCreateRequest,
    PedidoHistoricoOut,
    PedidoResponse,
    PedidoResumoResponse,
    PedidoTotalRequest,
    PropostaTransicaoResponse,
)
from app.api.pedidos.services.dependencies import get_pedido_admin_service
from app.api.pedidos.services.service_pedido_admin import PedidoAdminService
from app.api.pedidos.services.service_pedido_responses import PedidoResponseBuilder
from app.core.admin_dependencies import require_admin
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/pedidos/admin",
    tags=["Admin - Pedidos"],
    dependencies=[Depends(require_admin)],
)


# ======================================================================
# ============================ CONSULTAS ===============================
# ======================================================================
@router.get("", response_model=List[PedidoResumoResponse], status_code=status.HTTP_200_OK)
def listar_pedidos_admin(
    status_filtro: Optional[List[StatusPedido]] = Query(None, alias="status", description="Filtra por um ou mais status"),
    tipo_entrega: Optional[TipoEntrega] = Query(None),
    data_inicio: Optional[date] = Query(None, description="Data inicial (YYYY-MM-DD), inclusiva"),
    data_fim: Optional[date] = Query(None, description="Data final (YYYY-MM-DD), inclusiva"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    """
    Lista pedidos para o painel (consultado por polling; não altera nada).

    - **status**: pode ser repetido (`?status=pending_payment&status=being_prepared`)
    - **data_inicio / data_fim**: intervalo sobre a data de criação
    """
    return svc.listar_pedidos(
        status=status_filtro,
        tipo_entrega=tipo_entrega,
        data_inicio=data_inicio,
        data_fim=data_fim,
        skip=skip,
        limit=limit,
    )


@router.get("/pendentes/contagem", response_model=ContagemPendentesResponse)
def contar_pedidos_pendentes(
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    """Quantidade de pedidos aguardando pagamento (badge do painel)."""
    return ContagemPendentesResponse(pendentes=svc.contar_pendentes())


@router.get("/{pedido_id}", response_model=PedidoResponse)
def obter_pedido_admin(
    pedido_id: int = Path(..., gt=0),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    return PedidoResponseBuilder.pedido_to_response(svc.obter_pedido(pedido_id))


@router.get("/{pedido_id}/historico", response_model=List[PedidoHistoricoOut])
def obter_historico_pedido(
    pedido_id: int = Path(..., gt=0),
    limit: int = Query(100, ge=1, le=500),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    return svc.obter_historico(pedido_id, limit=limit)


@router.get("/{pedido_id}/proximo-status", response_model=PropostaTransicaoResponse)
def propor_transicao_pedido(
    pedido_id: int = Path(..., gt=0),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    """
    Prévia do próximo passo do pedido.

    - **exige_entregador**: abrir seleção de entregador antes de avançar
    - **exige_confirmacao**: pedir confirmação do operador e enviar `confirmado=true`
    """
    return svc.propor_transicao(pedido_id)


# ======================================================================
# ============================ MUTAÇÕES ================================
# ======================================================================
@router.post("", response_model=PedidoResponse, status_code=status.HTTP_201_CREATED)
def criar_pedido_admin(
    payload: PedidoCreateRequest,
    current_user: UsuarioModel = Depends(require_admin),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    logger.info(f"[Pedidos] Criar pedido admin - cliente={payload.usuario_id} admin={current_user.id}")
    pedido = svc.criar_pedido(payload, admin_id=current_user.id)
    return PedidoResponseBuilder.pedido_to_response(pedido)


@router.put("/{pedido_id}/status", response_model=PedidoResponse)
def avancar_status_pedido(
    pedido_id: int = Path(..., gt=0),
    payload: Optional[PedidoAvancarStatusRequest] = Body(None),
    current_user: UsuarioModel = Depends(require_admin),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    """
    Avança o pedido para o próximo status.

    - **entregador_id**: obrigatório em being_prepared -> on_the_way (delivery)
    - **confirmado**: obrigatório para marcar como entregue
    - **status_esperado / proximo_status / versao_esperada**: retornam 409 se o pedido mudou
    """
    payload = payload or PedidoAvancarStatusRequest()
    logger.info(f"[Pedidos] Avançar status - pedido={pedido_id} admin={current_user.id}")
    pedido = svc.avancar_status(
        pedido_id,
        entregador_id=payload.entregador_id,
        status_esperado=payload.status_esperado,
        proximo_status=payload.proximo_status,
        confirmado=payload.confirmado,
        versao_esperada=payload.versao_esperada,
        usuario_id=current_user.id,
    )
    return PedidoResponseBuilder.pedido_to_response(pedido)


@router.put("/{pedido_id}/cancelar", response_model=PedidoResponse)
def cancelar_pedido_admin(
    pedido_id: int = Path(..., gt=0),
    payload: Optional[PedidoCancelarRequest] = Body(None),
    current_user: UsuarioModel = Depends(require_admin),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    payload = payload or PedidoCancelarRequest()
    logger.info(f"[Pedidos] Cancelar - pedido={pedido_id} admin={current_user.id}")
    pedido = svc.cancelar_pedido(
        pedido_id,
        motivo=payload.motivo,
        versao_esperada=payload.versao_esperada,
        usuario_id=current_user.id,
    )
    return PedidoResponseBuilder.pedido_to_response(pedido)


@router.put("/{pedido_id}/total", response_model=PedidoResponse)
def alterar_total_pedido(
    payload: PedidoTotalRequest,
    pedido_id: int = Path(..., gt=0),
    current_user: UsuarioModel = Depends(require_admin),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    """Sobrescreve o total do pedido. A resposta traz `valor_total_calculado` para comparação."""
    logger.info(f"[Pedidos] Alterar total - pedido={pedido_id} valor={payload.valor_total} admin={current_user.id}")
    pedido = svc.alterar_total(
        pedido_id,
        payload.valor_total,
        versao_esperada=payload.versao_esperada,
        usuario_id=current_user.id,
    )
    return PedidoResponseBuilder.pedido_to_response(pedido)


@router.post("/{pedido_id}/itens", response_model=PedidoResponse, status_code=status.HTTP_201_CREATED)
def adicionar_item_pedido(
    payload: PedidoAdicionarItemRequest,
    pedido_id: int = Path(..., gt=0),
    current_user: UsuarioModel = Depends(require_admin),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    """
    Adiciona um item ao pedido e recalcula o total.

    - **preco**: opcional; quando omitido usa o preço atual do catálogo
    """
    logger.info(f"[Pedidos] Adicionar item - pedido={pedido_id} produto={payload.produto_id}")
    pedido = svc.adicionar_item(
        pedido_id,
        produto_id=payload.produto_id,
        quantidade=payload.quantidade,
        preco=payload.preco,
        complemento_ids=payload.complemento_ids,
        versao_esperada=payload.versao_esperada,
        usuario_id=current_user.id,
    )
    return PedidoResponseBuilder.pedido_to_response(pedido)


@router.delete("/{pedido_id}/itens/{item_id}", response_model=PedidoResponse)
def remover_item_pedido(
    pedido_id: int = Path(..., gt=0),
    item_id: int = Path(..., gt=0),
    versao_esperada: Optional[int] = Query(None),
    current_user: UsuarioModel = Depends(require_admin),
    svc: PedidoAdminService = Depends(get_pedido_admin_service),
):
    logger.info(f"[Pedidos] Remover item - pedido={pedido_id} item={item_id}")
    pedido = svc.remover_item(
        pedido_id,
        item_id,
        versao_esperada=versao_esperada,
        usuario_id=current_user.id,
    )
    return PedidoResponseBuilder.pedido_to_response(pedido)
