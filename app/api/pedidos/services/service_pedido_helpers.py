from __future__ import annotations

from typing import Optional

from app.api.pedidos.models.model_pedido import PedidoModel
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.core.exceptions import ConflictError, InvalidStateError, NotFoundError


def obter_pedido_ou_404(repo: PedidoRepository, pedido_id: int, *, for_update: bool = False) -> PedidoModel:
    pedido = repo.get_pedido(pedido_id, for_update=for_update)
    if not pedido:
        raise NotFoundError(f"Pedido {pedido_id} não encontrado", code="PEDIDO_NAO_ENCONTRADO")
    return pedido


def verificar_versao(pedido: PedidoModel, versao_esperada: Optional[int]) -> None:
    """ConflictError quando o cliente da API editou com base em uma versão antiga do pedido."""
    if versao_esperada is not None and versao_esperada != pedido.versao:
        raise ConflictError(
            "O pedido foi alterado desde a última leitura. Recarregue e tente novamente.",
            code="VERSAO_DESATUALIZADA",
            versao_atual=pedido.versao,
            versao_esperada=versao_esperada,
        )


def garantir_editavel(pedido: PedidoModel, operacao: str) -> None:
    """Pedidos entregues ou cancelados não aceitam alterações."""
    if pedido.is_terminal:
        raise InvalidStateError(
            f"Não é possível {operacao}: pedido {pedido.id} está {pedido.status_descricao.lower()}",
            code="PEDIDO_FINALIZADO",
            status=pedido.status.value,
        )
