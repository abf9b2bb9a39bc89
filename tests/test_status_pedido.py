from decimal import Decimal

import pytest

from app.api.pedidos.models.model_pedido import StatusPedido
from app.api.pedidos.models.model_pedido_historico import TipoOperacaoPedido
from app.api.pedidos.schemas import FinalizarPedidoRequest
from app.core.exceptions import ConflictError, InvalidStateError, NotFoundError, ValidationError

from conftest import ADMIN_ID, CLIENTE_ID, ENDERECO_ID, ENTREGADOR_ID, ENTREGADOR_INATIVO_ID, PRODUTO_A_ID


def _pedido_delivery(pedido_service):
    payload = FinalizarPedidoRequest(
        tipo_entrega="delivery",
        metodo_pagamento="PIX",
        endereco_id=ENDERECO_ID,
        taxa_entrega=Decimal("3.00"),
        itens=[{"produto_id": PRODUTO_A_ID, "quantidade": 2}],
    )
    return pedido_service.finalizar_pedido(payload, CLIENTE_ID)


def _pedido_pickup(pedido_service):
    payload = FinalizarPedidoRequest(
        tipo_entrega="pickup",
        metodo_pagamento="CREDIT_CARD",
        itens=[{"produto_id": PRODUTO_A_ID, "quantidade": 1}],
    )
    return pedido_service.finalizar_pedido(payload, CLIENTE_ID)


def test_fluxo_completo_de_entrega(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    assert pedido.status == StatusPedido.PENDING_PAYMENT
    assert pedido.valor_total == Decimal("23.00")

    pedido = status_service.avancar_status(pedido.id, usuario_id=ADMIN_ID)
    assert pedido.status == StatusPedido.BEING_PREPARED

    with pytest.raises(InvalidStateError) as exc:
        status_service.avancar_status(pedido.id, usuario_id=ADMIN_ID)
    assert exc.value.code == "ENTREGADOR_OBRIGATORIO"

    pedido = status_service.avancar_status(pedido.id, entregador_id=ENTREGADOR_ID, usuario_id=ADMIN_ID)
    assert pedido.status == StatusPedido.ON_THE_WAY
    assert pedido.entregador_id == ENTREGADOR_ID

    pedido = status_service.avancar_status(pedido.id, confirmado=True, usuario_id=ADMIN_ID)
    assert pedido.status == StatusPedido.DELIVERED
    assert pedido.is_terminal
    assert pedido.entregador_id == ENTREGADOR_ID

    operacoes = [h.tipo_operacao for h in pedido.historico]
    assert operacoes == [
        TipoOperacaoPedido.PEDIDO_CRIADO,
        TipoOperacaoPedido.STATUS_ALTERADO,
        TipoOperacaoPedido.ENTREGADOR_ASSOCIADO,
        TipoOperacaoPedido.STATUS_ALTERADO,
        TipoOperacaoPedido.STATUS_ALTERADO,
    ]


def test_entrega_exige_confirmacao(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    status_service.avancar_status(pedido.id)
    status_service.avancar_status(pedido.id, entregador_id=ENTREGADOR_ID)

    with pytest.raises(InvalidStateError) as exc:
        status_service.avancar_status(pedido.id)
    assert exc.value.code == "CONFIRMACAO_NECESSARIA"


def test_confirmacao_desligada_por_configuracao(db, pedido_service):
    from app.api.cadastros.adapters.entregador_adapter import EntregadorAdapter
    from app.api.pedidos.services.service_status_pedido import StatusPedidoService

    service = StatusPedidoService(db, EntregadorAdapter(db), exigir_confirmacao_entrega=False)
    pedido = _pedido_pickup(pedido_service)
    service.avancar_status(pedido.id)
    service.avancar_status(pedido.id)
    pedido = service.avancar_status(pedido.id)
    assert pedido.status == StatusPedido.DELIVERED


def test_fluxo_de_retirada_nao_aceita_entregador(pedido_service, status_service):
    pedido = _pedido_pickup(pedido_service)
    status_service.avancar_status(pedido.id)

    with pytest.raises(ValidationError) as exc:
        status_service.avancar_status(pedido.id, entregador_id=ENTREGADOR_ID)
    assert exc.value.field == "entregador_id"

    pedido = status_service.avancar_status(pedido.id)
    assert pedido.status == StatusPedido.READY_FOR_PICKUP
    assert pedido.entregador_id is None


def test_entregador_inexistente_ou_inativo(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    status_service.avancar_status(pedido.id)

    with pytest.raises(NotFoundError):
        status_service.avancar_status(pedido.id, entregador_id=999)
    with pytest.raises(ValidationError) as exc:
        status_service.avancar_status(pedido.id, entregador_id=ENTREGADOR_INATIVO_ID)
    assert exc.value.code == "ENTREGADOR_INATIVO"


def test_avancar_pedido_terminal_nao_faz_nada(pedido_service, status_service):
    pedido = _pedido_pickup(pedido_service)
    status_service.cancelar(pedido.id)
    versao = pedido.versao

    pedido = status_service.avancar_status(pedido.id)
    assert pedido.status == StatusPedido.CANCELED
    assert pedido.versao == versao


def test_status_esperado_divergente_gera_conflito(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    status_service.avancar_status(pedido.id)

    with pytest.raises(ConflictError) as exc:
        status_service.avancar_status(pedido.id, status_esperado=StatusPedido.PENDING_PAYMENT)
    assert exc.value.detail["status_atual"] == "being_prepared"

    with pytest.raises(ConflictError):
        status_service.avancar_status(
            pedido.id,
            entregador_id=ENTREGADOR_ID,
            proximo_status=StatusPedido.READY_FOR_PICKUP,
        )


def test_versao_desatualizada_gera_conflito(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    assert pedido.versao == 1
    status_service.avancar_status(pedido.id, versao_esperada=1)

    with pytest.raises(ConflictError) as exc:
        status_service.avancar_status(pedido.id, entregador_id=ENTREGADOR_ID, versao_esperada=1)
    assert exc.value.code == "VERSAO_DESATUALIZADA"


def test_cancelamento_permitido_antes_de_sair(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    status_service.avancar_status(pedido.id)

    pedido = status_service.cancelar(pedido.id, motivo="Cliente desistiu", usuario_id=ADMIN_ID)
    assert pedido.status == StatusPedido.CANCELED
    ultimo = pedido.historico[-1]
    assert ultimo.tipo_operacao == TipoOperacaoPedido.PEDIDO_CANCELADO
    assert ultimo.status_anterior == "being_prepared"
    assert "Cliente desistiu" in ultimo.descricao


def test_cancelamento_bloqueado_depois_de_sair(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    status_service.avancar_status(pedido.id)
    status_service.avancar_status(pedido.id, entregador_id=ENTREGADOR_ID)

    with pytest.raises(InvalidStateError) as exc:
        status_service.cancelar(pedido.id)
    assert exc.value.code == "CANCELAMENTO_NAO_PERMITIDO"


def test_proposta_de_transicao(pedido_service, status_service):
    pedido = _pedido_delivery(pedido_service)
    status_service.avancar_status(pedido.id)

    proposta = status_service.propor_transicao(pedido.id)
    assert proposta["status_atual"] == StatusPedido.BEING_PREPARED
    assert proposta["proximo_status"] == StatusPedido.ON_THE_WAY
    assert proposta["exige_entregador"] is True
    assert proposta["exige_confirmacao"] is False
    assert proposta["terminal"] is False
    assert proposta["versao"] == 2
