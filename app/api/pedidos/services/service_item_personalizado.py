"""
Resolução de itens personalizados (açaí/sorvete montado, produto com valor livre).

O item é resolvido uma única vez: o valor informado vira `preco_unitario` e os
nomes dos complementos são copiados para `opcoes_snapshot`, de modo que
renomear ou desativar um complemento depois não altera pedidos já feitos.
"""
from __future__ import annotations

from typing import List, Optional

from app.api.catalogo.contracts.complemento_contract import IComplementoContract, ComplementoDTO
from app.api.catalogo.contracts.produto_contract import IProdutoContract, ProdutoDTO
from app.api.catalogo.models.model_produto import TipoItemPersonalizado
from app.api.pedidos.models.model_pedido_item import PedidoItemModel
from app.api.pedidos.schemas.schema_pedido import ItemPersonalizadoRequest
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.database_utils import quantizar_dinheiro
from app.utils.logger import logger


def resolver_complementos(
    complemento_contract: IComplementoContract,
    complemento_ids: Optional[List[int]],
) -> List[ComplementoDTO]:
    """
    Busca os complementos na ordem informada.
    Falta de algum id -> NotFoundError; complemento inativo -> ValidationError.
    """
    ids = list(complemento_ids or [])
    if not ids:
        return []

    encontrados = {c.id: c for c in complemento_contract.buscar_por_ids(ids)}
    faltando = [cid for cid in ids if cid not in encontrados]
    if faltando:
        raise NotFoundError(
            f"Complemento(s) não encontrado(s): {', '.join(str(f) for f in faltando)}",
            code="COMPLEMENTO_NAO_ENCONTRADO",
            complemento_ids=faltando,
        )

    inativos = [cid for cid in ids if not encontrados[cid].ativo]
    if inativos:
        raise ValidationError(
            f"Complemento(s) indisponível(is): {', '.join(encontrados[i].nome for i in inativos)}",
            field="complemento_ids",
            code="COMPLEMENTO_INATIVO",
        )

    return [encontrados[cid] for cid in ids]


class ItemPersonalizadoService:
    def __init__(
        self,
        produto_contract: IProdutoContract,
        complemento_contract: IComplementoContract,
    ):
        self.produto_contract = produto_contract
        self.complemento_contract = complemento_contract

    def _produto_base(self, tipo: TipoItemPersonalizado, produto_id: Optional[int]) -> ProdutoDTO:
        if produto_id is not None:
            if tipo != TipoItemPersonalizado.PRODUTO:
                raise ValidationError(
                    "produto_id só pode ser informado para itens do tipo customProduct",
                    field="produto_id",
                )
            produto = self.produto_contract.obter_produto(produto_id)
            if not produto:
                raise NotFoundError(f"Produto {produto_id} não encontrado", code="PRODUTO_NAO_ENCONTRADO")
        else:
            produto = self.produto_contract.obter_produto_personalizado(tipo.value)
            if not produto:
                raise NotFoundError(
                    f"Produto base para itens {tipo.value} não está cadastrado",
                    code="PRODUTO_PERSONALIZADO_NAO_CONFIGURADO",
                )

        if not produto.ativo:
            raise ValidationError(f"Produto {produto.nome} está inativo", field="produto_id", code="PRODUTO_INATIVO")
        return produto

    def resolver(self, req: ItemPersonalizadoRequest) -> PedidoItemModel:
        """Transforma a requisição em um item de pedido (ainda não persistido)."""
        preco = quantizar_dinheiro(req.valor)
        if preco <= 0:
            raise ValidationError("O valor do item personalizado deve ser maior que zero", field="valor")
        if req.quantidade < 1:
            raise ValidationError("A quantidade deve ser no mínimo 1", field="quantidade")

        tipo = TipoItemPersonalizado(req.tipo)
        produto = self._produto_base(tipo, req.produto_id)
        complementos = resolver_complementos(self.complemento_contract, req.complemento_ids)

        snapshot = {
            tipo.value: {
                "value": str(preco),
                "selectedComplements": [c.id for c in complementos],
                "complementNames": [c.nome for c in complementos],
            }
        }

        logger.info(
            f"[ItemPersonalizado] Resolvido tipo={tipo.value} produto_id={produto.id} "
            f"valor={preco} qtd={req.quantidade} complementos={len(complementos)}"
        )

        return PedidoItemModel(
            produto_id=produto.id,
            quantidade=req.quantidade,
            preco_unitario=preco,
            complemento_ids=[c.id for c in complementos] or None,
            opcoes_snapshot=snapshot,
        )
