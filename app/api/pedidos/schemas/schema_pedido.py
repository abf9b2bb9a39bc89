from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.api.catalogo.models.model_produto import TipoItemPersonalizado
from app.api.pedidos.models.model_pedido import StatusPedido, TipoEntrega, MetodoPagamento


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class ItemPedidoRequest(BaseModel):
    """Item de catálogo. O preço é sempre o do catálogo no momento do pedido."""
    produto_id: int
    quantidade: int = Field(default=1, description="Quantidade (mínimo 1).")
    complemento_ids: Optional[List[int]] = Field(
        default=None, description="Complementos escolhidos (nomes são congelados no pedido)."
    )


class ItemPersonalizadoRequest(BaseModel):
    """
    Item montado pelo cliente com valor próprio.

    - **tipo**: customAcai, customSorvete ou customProduct
    - **valor**: preço unitário informado (> 0)
    - **produto_id**: apenas para customProduct, quando o item deriva de um produto do catálogo
    """
    tipo: TipoItemPersonalizado
    valor: Decimal
    quantidade: int = 1
    complemento_ids: List[int] = Field(default_factory=list)
    produto_id: Optional[int] = None


class FinalizarPedidoRequest(BaseModel):
    """Checkout do cliente."""
    tipo_entrega: TipoEntrega
    metodo_pagamento: MetodoPagamento
    endereco_id: Optional[int] = Field(default=None, description="Obrigatório para delivery.")
    taxa_entrega: Decimal = Field(default=Decimal("0"), ge=0, description="Ignorada em pedidos de retirada.")
    itens: List[ItemPedidoRequest] = Field(default_factory=list)
    itens_personalizados: List[ItemPersonalizadoRequest] = Field(default_factory=list)
    observacoes: Optional[str] = Field(default=None, max_length=500)
    precisa_troco: bool = False
    valor_troco: Optional[Decimal] = Field(default=None, description="Valor em dinheiro para cálculo do troco.")

    @model_validator(mode="after")
    def _normalizar_troco(self):
        # Troco só faz sentido para pagamento em dinheiro na entrega
        if self.metodo_pagamento != MetodoPagamento.CASH_ON_DELIVERY:
            self.precisa_troco = False
            self.valor_troco = None
        elif not self.precisa_troco:
            self.valor_troco = None
        return self


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class PedidoItemOut(BaseModel):
    id: int
    produto_id: Optional[int] = None
    produto_nome: Optional[str] = None
    quantidade: int
    preco_unitario: Decimal
    preco_total: Decimal
    complemento_ids: Optional[List[int]] = None
    nomes_complementos: List[str] = Field(default_factory=list)
    opcoes_snapshot: Optional[Dict[str, Any]] = None
    is_orfao: bool = False

    model_config = ConfigDict(from_attributes=True)


class ResumoItemOut(BaseModel):
    item_id: int
    produto_id: int
    nome: Optional[str] = None
    quantidade: int
    preco_unitario: Decimal
    total: Decimal
    complementos: List[str] = Field(default_factory=list)


class EnderecoEntregaOut(BaseModel):
    rua: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    telefone: Optional[str] = None


class PedidoResponse(BaseModel):
    id: int
    usuario_id: int
    status: StatusPedido
    status_descricao: str
    tipo_entrega: TipoEntrega
    metodo_pagamento: MetodoPagamento
    valor_total: Decimal
    valor_total_calculado: Decimal
    total_manual: bool
    taxa_entrega: Decimal
    observacoes: Optional[str] = None
    precisa_troco: bool
    valor_troco: Optional[Decimal] = None
    troco: Optional[Decimal] = None
    entregador_id: Optional[int] = None
    endereco_id: Optional[int] = None
    endereco_entrega: Optional[EnderecoEntregaOut] = None
    versao: int
    created_at: datetime
    updated_at: datetime
    itens: List[PedidoItemOut] = Field(default_factory=list)
    resumo_itens: List[ResumoItemOut] = Field(default_factory=list)


class PedidoResumoResponse(BaseModel):
    """Linha da listagem de pedidos (sem itens)."""
    id: int
    usuario_id: int
    status: StatusPedido
    tipo_entrega: TipoEntrega
    valor_total: Decimal
    total_manual: bool
    entregador_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ItemPersonalizadoPreviewResponse(BaseModel):
    produto_id: int
    quantidade: int
    preco_unitario: Decimal
    preco_total: Decimal
    complementos: List[str] = Field(default_factory=list)
    opcoes_snapshot: Dict[str, Any]
