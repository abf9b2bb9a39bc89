"""
Services do bounded context de Pedidos.
"""

from .service_pedido import PedidoService
from .service_pedido_admin import PedidoAdminService
from .service_status_pedido import StatusPedidoService

__all__ = [
    "PedidoService",
    "PedidoAdminService",
    "StatusPedidoService",
]
