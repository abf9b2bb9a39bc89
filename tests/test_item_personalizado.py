from decimal import Decimal

import pytest

from app.api.catalogo.adapters import ComplementoAdapter, ProdutoAdapter
from app.api.catalogo.models import ComplementoModel
from app.api.pedidos.schemas import ItemPersonalizadoRequest
from app.api.pedidos.services.service_item_personalizado import ItemPersonalizadoService
from app.core.exceptions import NotFoundError, ValidationError

from conftest import PRODUTO_A_ID, PRODUTO_INATIVO_ID


@pytest.fixture
def service(db):
    return ItemPersonalizadoService(ProdutoAdapter(db), ComplementoAdapter(db))


def test_resolve_acai_com_preco_e_nomes_congelados(service):
    item = service.resolver(
        ItemPersonalizadoRequest(tipo="customAcai", valor=Decimal("25.00"), complemento_ids=[3, 7])
    )

    assert item.preco_unitario == Decimal("25.00")
    assert item.produto_id == 3  # produto base do açaí personalizado
    assert item.complemento_ids == [3, 7]
    assert item.opcoes_snapshot == {
        "customAcai": {
            "value": "25.00",
            "selectedComplements": [3, 7],
            "complementNames": ["Leite em pó", "Granola"],
        }
    }
    assert item.nomes_complementos == ["Leite em pó", "Granola"]


def test_snapshot_nao_muda_quando_complemento_e_renomeado(service, db):
    item = service.resolver(
        ItemPersonalizadoRequest(tipo="customAcai", valor=Decimal("25.00"), complemento_ids=[3, 7])
    )

    complemento = db.get(ComplementoModel, 3)
    complemento.nome = "Leite Ninho"
    db.commit()

    assert item.opcoes_snapshot["customAcai"]["complementNames"] == ["Leite em pó", "Granola"]


def test_mantem_a_ordem_informada_dos_complementos(service):
    item = service.resolver(
        ItemPersonalizadoRequest(tipo="customSorvete", valor=Decimal("9.90"), complemento_ids=[7, 3])
    )
    assert item.produto_id == 4
    assert item.nomes_complementos == ["Granola", "Leite em pó"]


def test_valor_arredondado_para_centavos(service):
    item = service.resolver(ItemPersonalizadoRequest(tipo="customAcai", valor=Decimal("10.005")))
    assert item.preco_unitario == Decimal("10.01")


@pytest.mark.parametrize("valor", [Decimal("0"), Decimal("-1.00"), Decimal("0.004")])
def test_valor_precisa_ser_positivo(service, valor):
    with pytest.raises(ValidationError) as exc:
        service.resolver(ItemPersonalizadoRequest(tipo="customAcai", valor=valor))
    assert exc.value.field == "valor"


def test_quantidade_minima(service):
    with pytest.raises(ValidationError) as exc:
        service.resolver(ItemPersonalizadoRequest(tipo="customAcai", valor=Decimal("10"), quantidade=0))
    assert exc.value.field == "quantidade"


def test_complemento_inexistente(service):
    with pytest.raises(NotFoundError) as exc:
        service.resolver(
            ItemPersonalizadoRequest(tipo="customAcai", valor=Decimal("10"), complemento_ids=[3, 999])
        )
    assert exc.value.detail["code"] == "COMPLEMENTO_NAO_ENCONTRADO"
    assert exc.value.detail["complemento_ids"] == [999]


def test_complemento_inativo(service):
    with pytest.raises(ValidationError) as exc:
        service.resolver(
            ItemPersonalizadoRequest(tipo="customAcai", valor=Decimal("10"), complemento_ids=[8])
        )
    assert exc.value.code == "COMPLEMENTO_INATIVO"


def test_produto_id_apenas_para_custom_product(service):
    item = service.resolver(
        ItemPersonalizadoRequest(tipo="customProduct", valor=Decimal("15.00"), produto_id=PRODUTO_A_ID)
    )
    assert item.produto_id == PRODUTO_A_ID
    assert item.preco_unitario == Decimal("15.00")

    with pytest.raises(ValidationError):
        service.resolver(
            ItemPersonalizadoRequest(tipo="customAcai", valor=Decimal("15.00"), produto_id=PRODUTO_A_ID)
        )


def test_custom_product_com_produto_inativo(service):
    with pytest.raises(ValidationError) as exc:
        service.resolver(
            ItemPersonalizadoRequest(tipo="customProduct", valor=Decimal("15.00"), produto_id=PRODUTO_INATIVO_ID)
        )
    assert exc.value.code == "PRODUTO_INATIVO"
