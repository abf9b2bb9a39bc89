from decimal import Decimal

from conftest import ENDERECO_ID, ENTREGADOR_ID, ENTREGADOR_INATIVO_ID, PRODUTO_A_ID


def _checkout(client, headers, **extra):
    payload = {
        "tipo_entrega": "delivery",
        "metodo_pagamento": "PIX",
        "endereco_id": ENDERECO_ID,
        "taxa_entrega": "3.00",
        "itens": [{"produto_id": PRODUTO_A_ID, "quantidade": 2}],
    }
    payload.update(extra)
    return client.post("/api/pedidos/client/checkout", json=payload, headers=headers)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"status": "healthy"}


def test_metrics_expostas(client):
    client.get("/health")
    resp = client.get("/metrics")
    assert resp.status_code == 200, resp.text
    assert "http_requests_total" in resp.text


def test_checkout_delivery_calcula_total_e_copia_endereco(client, cliente_headers):
    resp = _checkout(client, cliente_headers, observacoes="Sem açúcar")
    assert resp.status_code == 201, resp.text

    body = resp.json()
    assert body["status"] == "pending_payment"
    assert body["status_descricao"] == "Aguardando pagamento"
    assert Decimal(body["valor_total"]) == Decimal("23.00")
    assert Decimal(body["valor_total_calculado"]) == Decimal("23.00")
    assert body["versao"] == 1
    assert body["endereco_entrega"] == {
        "rua": "Rua das Flores",
        "numero": "100",
        "complemento": "Apto 12",
        "bairro": "Centro",
        "telefone": "11988887777",
    }
    assert len(body["itens"]) == 1
    assert body["itens"][0]["produto_nome"] == "Açaí 500ml"
    assert Decimal(body["itens"][0]["preco_total"]) == Decimal("20.00")


def test_checkout_retirada_ignora_taxa(client, cliente_headers):
    resp = client.post(
        "/api/pedidos/client/checkout",
        json={
            "tipo_entrega": "pickup",
            "metodo_pagamento": "CREDIT_CARD",
            "taxa_entrega": "5.00",
            "itens": [{"produto_id": PRODUTO_A_ID}],
        },
        headers=cliente_headers,
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert Decimal(body["valor_total"]) == Decimal("10.00")
    assert Decimal(body["taxa_entrega"]) == Decimal("0.00")
    assert body["endereco_entrega"] is None


def test_checkout_com_item_personalizado(client, cliente_headers):
    resp = _checkout(
        client,
        cliente_headers,
        itens=[],
        itens_personalizados=[{"tipo": "customAcai", "valor": "25.00", "complemento_ids": [3, 7]}],
    )
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert Decimal(body["valor_total"]) == Decimal("28.00")
    item = body["itens"][0]
    assert item["nomes_complementos"] == ["Leite em pó", "Granola"]
    assert item["opcoes_snapshot"]["customAcai"]["value"] == "25.00"


def test_preview_item_personalizado(client, cliente_headers):
    resp = client.post(
        "/api/pedidos/client/itens-personalizados/preview",
        json={"tipo": "customSorvete", "valor": "12.00", "quantidade": 2, "complemento_ids": [7]},
        headers=cliente_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert Decimal(body["preco_total"]) == Decimal("24.00")
    assert body["complementos"] == ["Granola"]


def test_checkout_sem_itens(client, cliente_headers):
    resp = _checkout(client, cliente_headers, itens=[])
    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"]["code"] == "PEDIDO_SEM_ITENS"


def test_checkout_delivery_sem_endereco(client, cliente_headers):
    resp = _checkout(client, cliente_headers, endereco_id=None)
    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"]["field"] == "endereco_id"


def test_checkout_com_endereco_de_outro_cliente(client, outro_cliente_headers):
    resp = _checkout(client, outro_cliente_headers)
    assert resp.status_code == 404, resp.text
    assert resp.json()["detail"]["code"] == "ENDERECO_NAO_ENCONTRADO"


def test_checkout_troco_insuficiente(client, cliente_headers):
    resp = _checkout(
        client,
        cliente_headers,
        metodo_pagamento="CASH_ON_DELIVERY",
        precisa_troco=True,
        valor_troco="20.00",
    )
    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"]["code"] == "TROCO_INSUFICIENTE"


def test_checkout_exige_autenticacao(client):
    resp = _checkout(client, {})
    assert resp.status_code == 401, resp.text


def test_cliente_so_ve_os_proprios_pedidos(client, cliente_headers, outro_cliente_headers):
    pedido_id = _checkout(client, cliente_headers).json()["id"]

    resp = client.get("/api/pedidos/client", headers=cliente_headers)
    assert resp.status_code == 200, resp.text
    assert [p["id"] for p in resp.json()] == [pedido_id]

    assert client.get("/api/pedidos/client", headers=outro_cliente_headers).json() == []
    resp = client.get(f"/api/pedidos/client/{pedido_id}", headers=outro_cliente_headers)
    assert resp.status_code == 404, resp.text


def test_cliente_cancela_pedido_pendente(client, cliente_headers):
    pedido_id = _checkout(client, cliente_headers).json()["id"]
    resp = client.put(f"/api/pedidos/client/{pedido_id}/cancelar", headers=cliente_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "canceled"


def test_rotas_admin_exigem_perfil_admin(client, cliente_headers):
    resp = client.get("/api/pedidos/admin", headers=cliente_headers)
    assert resp.status_code == 403, resp.text


def test_fluxo_admin_de_entrega(client, cliente_headers, admin_headers):
    pedido_id = _checkout(client, cliente_headers).json()["id"]
    base = f"/api/pedidos/admin/{pedido_id}"

    resp = client.put(f"{base}/status", headers=admin_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "being_prepared"

    proposta = client.get(f"{base}/proximo-status", headers=admin_headers).json()
    assert proposta["proximo_status"] == "on_the_way"
    assert proposta["exige_entregador"] is True

    resp = client.put(f"{base}/status", json={}, headers=admin_headers)
    assert resp.status_code == 422, resp.text
    assert resp.json()["detail"]["code"] == "ENTREGADOR_OBRIGATORIO"

    resp = client.put(f"{base}/status", json={"entregador_id": ENTREGADOR_INATIVO_ID}, headers=admin_headers)
    assert resp.status_code == 400, resp.text

    resp = client.put(f"{base}/status", json={"entregador_id": ENTREGADOR_ID}, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "on_the_way"
    assert resp.json()["entregador_id"] == ENTREGADOR_ID

    resp = client.put(f"{base}/status", json={}, headers=admin_headers)
    assert resp.status_code == 422, resp.text
    assert resp.json()["detail"]["code"] == "CONFIRMACAO_NECESSARIA"

    resp = client.put(f"{base}/status", json={"confirmado": True}, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "delivered"

    resp = client.put(f"{base}/cancelar", headers=admin_headers)
    assert resp.status_code == 422, resp.text

    historico = client.get(f"{base}/historico", headers=admin_headers).json()
    assert historico[0]["status_novo"] == "delivered"
    assert historico[-1]["tipo_operacao"] == "PEDIDO_CRIADO"


def test_status_esperado_desatualizado_retorna_409(client, cliente_headers, admin_headers):
    pedido_id = _checkout(client, cliente_headers).json()["id"]
    client.put(f"/api/pedidos/admin/{pedido_id}/status", headers=admin_headers)

    resp = client.put(
        f"/api/pedidos/admin/{pedido_id}/status",
        json={"status_esperado": "pending_payment"},
        headers=admin_headers,
    )
    assert resp.status_code == 409, resp.text


def test_admin_edita_itens_e_total(client, cliente_headers, admin_headers):
    pedido = _checkout(client, cliente_headers).json()
    base = f"/api/pedidos/admin/{pedido['id']}"

    resp = client.put(f"{base}/total", json={"valor_total": "19.90", "versao_esperada": 1}, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert Decimal(body["valor_total"]) == Decimal("19.90")
    assert body["total_manual"] is True
    assert body["versao"] == 2

    resp = client.post(
        f"{base}/itens",
        json={"produto_id": PRODUTO_A_ID, "quantidade": 1, "versao_esperada": 1},
        headers=admin_headers,
    )
    assert resp.status_code == 409, resp.text

    resp = client.post(f"{base}/itens", json={"produto_id": PRODUTO_A_ID}, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert Decimal(body["valor_total"]) == Decimal("33.00")
    assert body["total_manual"] is False

    for item in body["itens"]:
        resp = client.delete(f"{base}/itens/{item['id']}", headers=admin_headers)
        assert resp.status_code == 200, resp.text
    assert Decimal(resp.json()["valor_total"]) == Decimal("3.00")


def test_admin_cria_pedido_e_lista_com_filtros(client, admin_headers):
    resp = client.post(
        "/api/pedidos/admin",
        json={
            "usuario_id": 1,
            "tipo_entrega": "pickup",
            "metodo_pagamento": "PIX",
            "itens": [{"produto_id": PRODUTO_A_ID, "quantidade": 3, "preco": "8.00"}],
        },
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    assert Decimal(resp.json()["valor_total"]) == Decimal("24.00")

    resp = client.get(
        "/api/pedidos/admin",
        params={"status": ["pending_payment", "being_prepared"], "tipo_entrega": "pickup"},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    assert len(resp.json()) == 1

    resp = client.get("/api/pedidos/admin", params={"tipo_entrega": "delivery"}, headers=admin_headers)
    assert resp.json() == []

    resp = client.get("/api/pedidos/admin/pendentes/contagem", headers=admin_headers)
    assert resp.json() == {"pendentes": 1}


def test_listagem_com_intervalo_de_datas_invertido(client, admin_headers):
    resp = client.get(
        "/api/pedidos/admin",
        params={"data_inicio": "2026-10-10", "data_fim": "2026-10-01"},
        headers=admin_headers,
    )
    assert resp.status_code == 400, resp.text


def test_pedido_inexistente(client, admin_headers):
    resp = client.get("/api/pedidos/admin/999", headers=admin_headers)
    assert resp.status_code == 404, resp.text
    assert resp.json()["detail"]["code"] == "PEDIDO_NAO_ENCONTRADO"
