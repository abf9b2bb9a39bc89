from app.api.pedidos.models.model_pedido import (
    PedidoModel,
    StatusPedido,
    TipoEntrega,
    MetodoPagamento,
    STATUS_TERMINAIS,
)
from app.api.pedidos.models.model_pedido_item import PedidoItemModel
from app.api.pedidos.models.model_pedido_historico import PedidoHistoricoModel, TipoOperacaoPedido

__all__ = [
    "PedidoModel",
    "StatusPedido",
    "TipoEntrega",
    "MetodoPagamento",
    "STATUS_TERMINAIS",
    "PedidoItemModel",
    "PedidoHistoricoModel",
    "TipoOperacaoPedido",
]
