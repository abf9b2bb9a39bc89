"""
Helper para notificações de mudança de status de pedidos.
Extrai os dados relevantes do pedido e registra o evento para o painel/cliente.
"""
from typing import Any, Dict, Optional

from app.api.pedidos.models.model_pedido import PedidoModel, StatusPedido
from app.utils.logger import logger


def montar_evento_status(
    pedido: PedidoModel,
    status_anterior: StatusPedido,
    *,
    usuario_id: Optional[int] = None,
) -> Dict[str, Any]:
    status_novo = StatusPedido(pedido.status)
    return {
        "evento": "pedido.status_alterado",
        "pedido_id": pedido.id,
        "cliente_id": pedido.usuario_id,
        "status_anterior": StatusPedido(status_anterior).value,
        "status_novo": status_novo.value,
        "status_descricao": pedido.status_descricao,
        "entregador_id": pedido.entregador_id,
        "alterado_por": usuario_id,
    }


def notificar_mudanca_status(
    pedido: PedidoModel,
    status_anterior: StatusPedido,
    *,
    usuario_id: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Notifica a mudança de status. Chamado somente depois do commit, para nunca
    anunciar uma transição que acabou desfeita.
    """
    evento = montar_evento_status(pedido, status_anterior, usuario_id=usuario_id)
    logger.info(
        f"[Notificacao] Pedido {evento['pedido_id']} do cliente {evento['cliente_id']}: "
        f"{evento['status_anterior']} -> {evento['status_novo']}"
    )
    return evento
