from decimal import Decimal

from app.api.pedidos.models.model_pedido import PedidoModel, TipoEntrega
from app.api.pedidos.models.model_pedido_item import PedidoItemModel
from app.api.pedidos.services.service_precificacao import (
    calcular_subtotal,
    calcular_total_do_pedido,
    calcular_total_item,
    calcular_total_pedido,
    resumo_itens,
)
from app.utils.database_utils import quantizar_dinheiro


def _item(preco, quantidade=1, produto_id=1, item_id=None, snapshot=None):
    return PedidoItemModel(
        id=item_id,
        produto_id=produto_id,
        quantidade=quantidade,
        preco_unitario=Decimal(preco),
        opcoes_snapshot=snapshot,
    )


def test_total_do_item_multiplica_pela_quantidade():
    assert calcular_total_item(_item("10.00", 2)) == Decimal("20.00")
    assert calcular_total_item(_item("25.00", 3)) == Decimal("75.00")


def test_quantizar_arredonda_meio_para_cima():
    assert quantizar_dinheiro(Decimal("2.345")) == Decimal("2.35")
    assert quantizar_dinheiro("0.005") == Decimal("0.01")
    assert quantizar_dinheiro(None) == Decimal("0.00")


def test_taxa_entra_apenas_em_delivery():
    itens = [_item("10.00", 2)]
    assert calcular_total_pedido(itens, TipoEntrega.DELIVERY, Decimal("3.00")) == Decimal("23.00")
    assert calcular_total_pedido(itens, TipoEntrega.PICKUP, Decimal("3.00")) == Decimal("20.00")


def test_pedido_sem_itens_fica_apenas_com_a_taxa():
    assert calcular_total_pedido([], TipoEntrega.DELIVERY, Decimal("3.00")) == Decimal("3.00")
    assert calcular_total_pedido([], TipoEntrega.PICKUP, None) == Decimal("0.00")


def test_item_orfao_soma_no_total_mas_fica_fora_do_resumo():
    itens = [
        _item("10.00", 1, produto_id=1, item_id=1),
        _item("7.50", 2, produto_id=None, item_id=2),
    ]
    assert calcular_subtotal(itens) == Decimal("25.00")

    linhas = resumo_itens(itens)
    assert [linha["item_id"] for linha in linhas] == [1]
    assert linhas[0]["total"] == Decimal("10.00")


def test_resumo_usa_nomes_congelados_dos_complementos():
    item = _item(
        "25.00",
        1,
        item_id=1,
        snapshot={"customAcai": {"value": "25.00", "selectedComplements": [3], "complementNames": ["Leite em pó"]}},
    )
    assert resumo_itens([item])[0]["complementos"] == ["Leite em pó"]


def test_total_do_pedido_usa_itens_e_taxa_do_pedido():
    pedido = PedidoModel(tipo_entrega=TipoEntrega.DELIVERY, taxa_entrega=Decimal("4.00"))
    pedido.itens.extend([_item("10.00", 1), _item("12.50", 2)])
    assert calcular_total_do_pedido(pedido) == Decimal("39.00")
