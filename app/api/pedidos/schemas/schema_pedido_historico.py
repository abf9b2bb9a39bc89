from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.api.pedidos.models.model_pedido_historico import TipoOperacaoPedido


class PedidoHistoricoOut(BaseModel):
    id: int
    pedido_id: int
    tipo_operacao: TipoOperacaoPedido
    status_anterior: Optional[str] = None
    status_novo: Optional[str] = None
    descricao: Optional[str] = None
    usuario_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
