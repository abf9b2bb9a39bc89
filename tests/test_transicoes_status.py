import pytest

from app.api.pedidos.models.model_pedido import StatusPedido, TipoEntrega
from app.api.pedidos.utils.transicoes_status import exige_entregador, pode_cancelar, proximo_status


@pytest.mark.parametrize(
    "atual, tipo, esperado",
    [
        (StatusPedido.PENDING_PAYMENT, TipoEntrega.DELIVERY, StatusPedido.BEING_PREPARED),
        (StatusPedido.PENDING_PAYMENT, TipoEntrega.PICKUP, StatusPedido.BEING_PREPARED),
        (StatusPedido.BEING_PREPARED, TipoEntrega.DELIVERY, StatusPedido.ON_THE_WAY),
        (StatusPedido.BEING_PREPARED, TipoEntrega.PICKUP, StatusPedido.READY_FOR_PICKUP),
        (StatusPedido.ON_THE_WAY, TipoEntrega.DELIVERY, StatusPedido.DELIVERED),
        (StatusPedido.READY_FOR_PICKUP, TipoEntrega.PICKUP, StatusPedido.DELIVERED),
    ],
)
def test_proximo_status_segue_o_fluxo(atual, tipo, esperado):
    assert proximo_status(atual, tipo) == esperado


@pytest.mark.parametrize("terminal", [StatusPedido.DELIVERED, StatusPedido.CANCELED])
@pytest.mark.parametrize("tipo", [TipoEntrega.DELIVERY, TipoEntrega.PICKUP])
def test_status_terminal_e_ponto_fixo(terminal, tipo):
    assert proximo_status(terminal, tipo) == terminal


def test_aceita_valores_string():
    assert proximo_status("being_prepared", "pickup") == StatusPedido.READY_FOR_PICKUP


def test_combinacao_incompativel_levanta_erro():
    with pytest.raises(ValueError):
        proximo_status(StatusPedido.ON_THE_WAY, TipoEntrega.PICKUP)
    with pytest.raises(ValueError):
        proximo_status(StatusPedido.READY_FOR_PICKUP, TipoEntrega.DELIVERY)


def test_entregador_so_e_exigido_ao_sair_para_entrega():
    assert exige_entregador(StatusPedido.BEING_PREPARED, TipoEntrega.DELIVERY)
    assert not exige_entregador(StatusPedido.BEING_PREPARED, TipoEntrega.PICKUP)
    assert not exige_entregador(StatusPedido.PENDING_PAYMENT, TipoEntrega.DELIVERY)
    assert not exige_entregador(StatusPedido.ON_THE_WAY, TipoEntrega.DELIVERY)


def test_cancelamento_permitido_somente_antes_de_sair():
    assert pode_cancelar(StatusPedido.PENDING_PAYMENT)
    assert pode_cancelar(StatusPedido.BEING_PREPARED)
    assert not pode_cancelar(StatusPedido.ON_THE_WAY)
    assert not pode_cancelar(StatusPedido.READY_FOR_PICKUP)
    assert not pode_cancelar(StatusPedido.DELIVERED)
    assert not pode_cancelar(StatusPedido.CANCELED)
