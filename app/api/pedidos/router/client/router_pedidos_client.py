"""
Router de pedidos para o cliente autenticado: checkout, histórico e cancelamento.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from app.api.cadastros.models.model_usuario import UsuarioModel
from app.api.pedidos.schemas import (
    FinalizarPedidoRequest,
    ItemPersonalizadoPreviewResponse,
    ItemPersonalizadoRequest,
    PedidoResponse,
    PedidoResumoResponse,
)
from app.api.pedidos.services.dependencies import get_pedido_service
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.pedidos.services.service_pedido_responses import PedidoResponseBuilder
from app.api.pedidos.services.service_precificacao import calcular_total_item
from app.core.admin_dependencies import get_current_user
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/pedidos/client",
    tags=["Client - Pedidos"],
)


@router.post("/checkout", response_model=PedidoResponse, status_code=status.HTTP_201_CREATED)
def finalizar_pedido(
    payload: FinalizarPedidoRequest,
    current_user: UsuarioModel = Depends(get_current_user),
    svc: PedidoService = Depends(get_pedido_service),
):
    """
    Finaliza o pedido do cliente.

    - **tipo_entrega**: delivery (exige endereco_id) ou pickup
    - **itens**: itens de catálogo (preço do catálogo)
    - **itens_personalizados**: açaí/sorvete/produto montado com valor próprio
    - **precisa_troco / valor_troco**: apenas para CASH_ON_DELIVERY
    """
    logger.info(f"[Pedidos] Checkout - cliente={current_user.id} tipo={payload.tipo_entrega.value}")
    pedido = svc.finalizar_pedido(payload, current_user.id)
    return PedidoResponseBuilder.pedido_to_response(pedido)


@router.post("/itens-personalizados/preview", response_model=ItemPersonalizadoPreviewResponse)
def preview_item_personalizado(
    payload: ItemPersonalizadoRequest,
    current_user: UsuarioModel = Depends(get_current_user),
    svc: PedidoService = Depends(get_pedido_service),
):
    """Resolve o item personalizado sem gravar (mostra preço e complementos congelados)."""
    item = svc.resolver_item_personalizado(payload)
    return ItemPersonalizadoPreviewResponse(
        produto_id=item.produto_id,
        quantidade=item.quantidade,
        preco_unitario=item.preco_unitario,
        preco_total=calcular_total_item(item),
        complementos=item.nomes_complementos,
        opcoes_snapshot=item.opcoes_snapshot,
    )


@router.get("", response_model=List[PedidoResumoResponse])
def listar_meus_pedidos(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    current_user: UsuarioModel = Depends(get_current_user),
    svc: PedidoService = Depends(get_pedido_service),
):
    return svc.listar_pedidos_cliente(current_user.id, skip=skip, limit=limit)


@router.get("/{pedido_id}", response_model=PedidoResponse)
def obter_meu_pedido(
    pedido_id: int = Path(..., gt=0),
    current_user: UsuarioModel = Depends(get_current_user),
    svc: PedidoService = Depends(get_pedido_service),
):
    return PedidoResponseBuilder.pedido_to_response(svc.obter_pedido_cliente(pedido_id, current_user.id))


@router.put("/{pedido_id}/cancelar", response_model=PedidoResponse)
def cancelar_meu_pedido(
    pedido_id: int = Path(..., gt=0),
    current_user: UsuarioModel = Depends(get_current_user),
    svc: PedidoService = Depends(get_pedido_service),
):
    logger.info(f"[Pedidos] Cancelamento pelo cliente - pedido={pedido_id} cliente={current_user.id}")
    pedido = svc.cancelar_pedido_cliente(pedido_id, current_user.id)
    return PedidoResponseBuilder.pedido_to_response(pedido)
