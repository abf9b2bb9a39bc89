"""
Cálculo de valores dos pedidos.

Todo o cálculo é feito com Decimal e arredondado para 2 casas (ROUND_HALF_UP).
O preço usado é sempre o congelado no item (`preco_unitario`); o catálogo nunca
é consultado, então itens cujo produto foi excluído continuam somando.
"""
from decimal import Decimal
from typing import Iterable, List, Union

from app.api.pedidos.models.model_pedido import PedidoModel, TipoEntrega
from app.api.pedidos.models.model_pedido_item import PedidoItemModel
from app.utils.database_utils import quantizar_dinheiro


def calcular_total_item(item: PedidoItemModel) -> Decimal:
    """preco_unitario x quantidade (vale igualmente para itens de catálogo e personalizados)."""
    preco = quantizar_dinheiro(item.preco_unitario)
    return quantizar_dinheiro(preco * int(item.quantidade or 0))


def calcular_subtotal(itens: Iterable[PedidoItemModel]) -> Decimal:
    subtotal = Decimal("0")
    for item in itens:
        subtotal += calcular_total_item(item)
    return quantizar_dinheiro(subtotal)


def calcular_total_pedido(
    itens: Iterable[PedidoItemModel],
    tipo_entrega: Union[TipoEntrega, str],
    taxa_entrega=None,
) -> Decimal:
    """Soma dos itens + taxa de entrega (a taxa só entra em pedidos delivery)."""
    total = calcular_subtotal(itens)
    if TipoEntrega(tipo_entrega) == TipoEntrega.DELIVERY:
        total += quantizar_dinheiro(taxa_entrega)
    return quantizar_dinheiro(total)


def calcular_total_do_pedido(pedido: PedidoModel) -> Decimal:
    return calcular_total_pedido(pedido.itens, pedido.tipo_entrega, pedido.taxa_entrega)


def resumo_itens(itens: Iterable[PedidoItemModel]) -> List[dict]:
    """
    Linhas para exibição do pedido. Itens órfãos (produto excluído) são omitidos,
    apesar de continuarem contando no total.
    """
    linhas = []
    for item in itens:
        if item.is_orfao:
            continue
        linhas.append({
            "item_id": item.id,
            "produto_id": item.produto_id,
            "nome": item.produto_nome,
            "quantidade": item.quantidade,
            "preco_unitario": quantizar_dinheiro(item.preco_unitario),
            "total": calcular_total_item(item),
            "complementos": item.nomes_complementos,
        })
    return linhas
