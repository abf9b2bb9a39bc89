from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from app.api.pedidos.models.model_pedido import StatusPedido
from app.api.pedidos.schemas.schema_pedido import FinalizarPedidoRequest, ItemPedidoRequest


class ItemPedidoAdminRequest(ItemPedidoRequest):
    preco: Optional[Decimal] = Field(
        default=None, description="Preço unitário manual (> 0). Quando omitido usa o preço do catálogo."
    )


class PedidoCreateRequest(FinalizarPedidoRequest):
    """Criação de pedido pelo admin em nome de um cliente."""

    usuario_id: int = Field(description="Cliente dono do pedido.")
    itens: List[ItemPedidoAdminRequest] = Field(default_factory=list)


class VersaoEsperadaMixin(BaseModel):
    versao_esperada: Optional[int] = Field(
        default=None,
        description="Versão do pedido que o cliente da API viu por último. Se divergir, retorna 409.",
    )


class PedidoAvancarStatusRequest(VersaoEsperadaMixin):
    """
    Avança o pedido para o próximo status do fluxo.

    - **entregador_id**: obrigatório apenas ao sair para entrega (being_prepared -> on_the_way)
    - **status_esperado**: status atual que o painel exibia
    - **proximo_status**: status de destino que o painel exibia
    - **confirmado**: confirmação explícita exigida para marcar como entregue
    """
    entregador_id: Optional[int] = None
    status_esperado: Optional[StatusPedido] = None
    proximo_status: Optional[StatusPedido] = None
    confirmado: bool = False


class PedidoTotalRequest(VersaoEsperadaMixin):
    valor_total: Decimal = Field(description="Novo valor total (> 0).")


class PedidoAdicionarItemRequest(VersaoEsperadaMixin):
    produto_id: int
    quantidade: int = 1
    preco: Optional[Decimal] = Field(default=None, description="Preço unitário manual (> 0).")
    complemento_ids: Optional[List[int]] = None


class PedidoCancelarRequest(VersaoEsperadaMixin):
    motivo: Optional[str] = Field(default=None, max_length=255)


class PropostaTransicaoResponse(BaseModel):
    pedido_id: int
    status_atual: StatusPedido
    proximo_status: StatusPedido
    terminal: bool
    exige_entregador: bool
    exige_confirmacao: bool
    versao: int


class ContagemPendentesResponse(BaseModel):
    pendentes: int
