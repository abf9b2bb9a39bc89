from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from app.api.catalogo.contracts.complemento_contract import IComplementoContract
from app.api.catalogo.contracts.produto_contract import IProdutoContract
from app.api.pedidos.models.model_pedido_item import PedidoItemModel
from app.api.pedidos.services.service_item_personalizado import resolver_complementos
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.database_utils import quantizar_dinheiro


def montar_item_catalogo(
    produto_contract: IProdutoContract,
    complemento_contract: IComplementoContract,
    *,
    produto_id: int,
    quantidade: int,
    preco: Optional[Decimal] = None,
    complemento_ids: Optional[List[int]] = None,
) -> PedidoItemModel:
    """
    Monta um item de catálogo com o preço congelado.

    - produto inexistente -> NotFoundError; inativo -> ValidationError
    - `preco` omitido usa o preço atual do catálogo; o valor em centavos deve ser > 0
      nos dois casos (placeholders de item personalizado custam 0)
    - nomes dos complementos são copiados para o snapshot
    """
    if quantidade is None or quantidade < 1:
        raise ValidationError("A quantidade deve ser no mínimo 1", field="quantidade")

    produto = produto_contract.obter_produto(produto_id)
    if not produto:
        raise NotFoundError(f"Produto {produto_id} não encontrado", code="PRODUTO_NAO_ENCONTRADO")
    if not produto.ativo:
        raise ValidationError(f"Produto {produto.nome} está inativo", field="produto_id", code="PRODUTO_INATIVO")

    if preco is not None:
        preco_unitario = quantizar_dinheiro(preco)
        if preco_unitario <= 0:
            raise ValidationError("O preço deve ser maior que zero", field="preco")
    else:
        preco_unitario = quantizar_dinheiro(produto.preco)
        if preco_unitario <= 0:
            raise ValidationError(
                f"Produto {produto.nome} não tem preço de catálogo; informe o preço do item",
                field="preco",
                code="PRECO_OBRIGATORIO",
            )

    complementos = resolver_complementos(complemento_contract, complemento_ids)
    snapshot = {"complementNames": [c.nome for c in complementos]} if complementos else None

    return PedidoItemModel(
        produto_id=produto.id,
        quantidade=quantidade,
        preco_unitario=preco_unitario,
        complemento_ids=[c.id for c in complementos] or None,
        opcoes_snapshot=snapshot,
    )
