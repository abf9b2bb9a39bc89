"""
Tabela de transições de status dos pedidos.

A chave é (status atual, tipo de entrega). O único ponto em que o fluxo
se divide é `being_prepared`: delivery segue para `on_the_way` e retirada
para `ready_for_pickup`. Status terminais não aparecem na tabela e são
pontos fixos de `proximo_status`.
"""
from typing import Dict, Tuple, Union

from app.api.pedidos.models.model_pedido import StatusPedido, TipoEntrega, STATUS_TERMINAIS

PROXIMO_STATUS: Dict[Tuple[StatusPedido, TipoEntrega], StatusPedido] = {
    (StatusPedido.PENDING_PAYMENT, TipoEntrega.DELIVERY): StatusPedido.BEING_PREPARED,
    (StatusPedido.PENDING_PAYMENT, TipoEntrega.PICKUP): StatusPedido.BEING_PREPARED,
    (StatusPedido.BEING_PREPARED, TipoEntrega.DELIVERY): StatusPedido.ON_THE_WAY,
    (StatusPedido.BEING_PREPARED, TipoEntrega.PICKUP): StatusPedido.READY_FOR_PICKUP,
    (StatusPedido.ON_THE_WAY, TipoEntrega.DELIVERY): StatusPedido.DELIVERED,
    (StatusPedido.READY_FOR_PICKUP, TipoEntrega.PICKUP): StatusPedido.DELIVERED,
}

STATUS_CANCELAVEIS = frozenset({StatusPedido.PENDING_PAYMENT, StatusPedido.BEING_PREPARED})


def proximo_status(
    atual: Union[StatusPedido, str],
    tipo_entrega: Union[TipoEntrega, str],
) -> StatusPedido:
    """Retorna o próximo status do fluxo; para status terminais retorna o próprio status."""
    atual = StatusPedido(atual)
    tipo_entrega = TipoEntrega(tipo_entrega)

    if atual in STATUS_TERMINAIS:
        return atual
    try:
        return PROXIMO_STATUS[(atual, tipo_entrega)]
    except KeyError:
        # on_the_way só existe para delivery e ready_for_pickup só para retirada
        raise ValueError(f"Status {atual.value} não é válido para pedidos do tipo {tipo_entrega.value}")


def exige_entregador(atual: StatusPedido, tipo_entrega: TipoEntrega) -> bool:
    """Saída para entrega (being_prepared -> on_the_way) só acontece com entregador definido."""
    return (
        StatusPedido(atual) == StatusPedido.BEING_PREPARED
        and TipoEntrega(tipo_entrega) == TipoEntrega.DELIVERY
    )


def pode_cancelar(atual: Union[StatusPedido, str]) -> bool:
    return StatusPedido(atual) in STATUS_CANCELAVEIS
