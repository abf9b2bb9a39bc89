"""
Schemas (DTOs) do bounded context de Pedidos.
"""

from .schema_pedido import (
    ItemPedidoRequest,
    ItemPersonalizadoRequest,
    FinalizarPedidoRequest,
    PedidoItemOut,
    ResumoItemOut,
    EnderecoEntregaOut,
    PedidoResponse,
    PedidoResumoResponse,
    ItemPersonalizadoPreviewResponse,
)
from .schema_pedido_admin import (
    ItemPedidoAdminRequest,
    PedidoCreateRequest,
    PedidoAvancarStatusRequest,
    PedidoTotalRequest,
    PedidoAdicionarItemRequest,
    PedidoCancelarRequest,
    PropostaTransicaoResponse,
    ContagemPendentesResponse,
)
from .schema_pedido_historico import PedidoHistoricoOut
