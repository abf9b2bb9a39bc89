"""
Operações administrativas sobre pedidos existentes.

Cada operação roda em uma única transação e termina com o compare-and-set
da versão do pedido (`PedidoRepository.confirmar_alteracao`).
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.catalogo.contracts.complemento_contract import IComplementoContract
from app.api.catalogo.contracts.produto_contract import IProdutoContract
from app.api.pedidos.models.model_pedido import PedidoModel, StatusPedido, TipoEntrega
from app.api.pedidos.models.model_pedido_historico import PedidoHistoricoModel, TipoOperacaoPedido
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.api.pedidos.schemas.schema_pedido_admin import PedidoCreateRequest
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.pedidos.services.service_pedido_helpers import (
    garantir_editavel,
    obter_pedido_ou_404,
    verificar_versao,
)
from app.api.pedidos.services.service_precificacao import calcular_total_do_pedido
from app.api.pedidos.services.service_status_pedido import StatusPedidoService
from app.api.pedidos.utils.produtos_builder import montar_item_catalogo
from app.core.exceptions import NotFoundError, ValidationError
from app.utils.database_utils import quantizar_dinheiro
from app.utils.logger import logger


class PedidoAdminService:
    def __init__(
        self,
        db: Session,
        *,
        produto_contract: IProdutoContract,
        complemento_contract: IComplementoContract,
        pedido_service: PedidoService,
        status_service: StatusPedidoService,
    ):
        self.db = db
        self.repo = PedidoRepository(db)
        self.produto_contract = produto_contract
        self.complemento_contract = complemento_contract
        self.pedido_service = pedido_service
        self.status_service = status_service

    # ---------------- consultas ----------------
    def listar_pedidos(
        self,
        *,
        status: Optional[List[StatusPedido]] = None,
        tipo_entrega: Optional[TipoEntrega] = None,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[PedidoModel]:
        if data_inicio and data_fim and data_inicio > data_fim:
            raise ValidationError("data_inicio deve ser anterior ou igual a data_fim", field="data_inicio")
        return self.repo.list_pedidos(
            status=status,
            tipo_entrega=tipo_entrega,
            data_inicio=data_inicio,
            data_fim=data_fim,
            skip=skip,
            limit=limit,
        )

    def obter_pedido(self, pedido_id: int) -> PedidoModel:
        return obter_pedido_ou_404(self.repo, pedido_id)

    def obter_historico(self, pedido_id: int, limit: int = 100) -> List[PedidoHistoricoModel]:
        obter_pedido_ou_404(self.repo, pedido_id)
        return self.repo.get_historico(pedido_id, limit=limit)

    def contar_pendentes(self) -> int:
        return self.repo.contar_por_status(StatusPedido.PENDING_PAYMENT)

    # ---------------- criação / status ----------------
    def criar_pedido(self, payload: PedidoCreateRequest, admin_id: Optional[int] = None) -> PedidoModel:
        return self.pedido_service.finalizar_pedido(payload, payload.usuario_id, criado_por_id=admin_id)

    def propor_transicao(self, pedido_id: int) -> dict:
        return self.status_service.propor_transicao(pedido_id)

    def avancar_status(self, pedido_id: int, **kwargs) -> PedidoModel:
        return self.status_service.avancar_status(pedido_id, **kwargs)

    def cancelar_pedido(
        self,
        pedido_id: int,
        *,
        motivo: Optional[str] = None,
        versao_esperada: Optional[int] = None,
        usuario_id: Optional[int] = None,
    ) -> PedidoModel:
        return self.status_service.cancelar(
            pedido_id,
            motivo=motivo,
            versao_esperada=versao_esperada,
            usuario_id=usuario_id,
        )

    # ---------------- edição ----------------
    def _garantir_troco_suficiente(self, pedido: PedidoModel, novo_total: Decimal) -> None:
        """
        Pedido em dinheiro com troco: o valor informado pelo cliente precisa cobrir
        o novo total. Caso contrário a edição é desfeita inteira.
        """
        if not pedido.precisa_troco or pedido.valor_troco is None:
            return
        valor_troco = quantizar_dinheiro(pedido.valor_troco)
        if valor_troco >= novo_total:
            return

        pedido_id = pedido.id
        self.repo.rollback()
        logger.warning(
            f"[PedidoAdmin] Pedido {pedido_id}: edição recusada, total {novo_total} "
            f"acima do valor para troco {valor_troco}"
        )
        raise ValidationError(
            f"Valor para troco ({valor_troco}) é menor que o novo total do pedido ({novo_total})",
            field="valor_troco",
            code="TROCO_INSUFICIENTE",
            valor_total=str(novo_total),
        )

    def _recalcular_total(self, pedido: PedidoModel, usuario_id: Optional[int]) -> None:
        """
        Recalcula valor_total a partir dos itens. Se havia um total manual, ele é
        descartado: registra aviso no log e no histórico.
        """
        novo_total = calcular_total_do_pedido(pedido)
        self._garantir_troco_suficiente(pedido, novo_total)

        if pedido.total_manual:
            total_anterior = quantizar_dinheiro(pedido.valor_total)
            logger.warning(
                f"[PedidoAdmin] Pedido {pedido.id}: total manual {total_anterior} descartado "
                f"pelo recálculo após edição de itens (novo total {novo_total})"
            )
            self.repo.add_historico(
                pedido,
                TipoOperacaoPedido.TOTAL_RECALCULADO,
                descricao=f"Total manual {total_anterior} substituído pelo recalculado {novo_total}",
                usuario_id=usuario_id,
            )
            pedido.total_manual = False

        pedido.valor_total = novo_total

    def alterar_total(
        self,
        pedido_id: int,
        novo_total: Decimal,
        *,
        versao_esperada: Optional[int] = None,
        usuario_id: Optional[int] = None,
    ) -> PedidoModel:
        """Sobrescreve o total do pedido (ajuste manual do admin)."""
        novo_total = quantizar_dinheiro(novo_total) if novo_total is not None else None
        if novo_total is None or novo_total <= 0:
            raise ValidationError("O total deve ser maior que zero", field="valor_total")

        pedido = obter_pedido_ou_404(self.repo, pedido_id, for_update=True)
        versao_lida = pedido.versao
        verificar_versao(pedido, versao_esperada)
        garantir_editavel(pedido, "alterar o total")
        self._garantir_troco_suficiente(pedido, novo_total)

        total_anterior = quantizar_dinheiro(pedido.valor_total)
        total_calculado = calcular_total_do_pedido(pedido)

        pedido.valor_total = novo_total
        pedido.total_manual = True
        self.repo.add_historico(
            pedido,
            TipoOperacaoPedido.TOTAL_ALTERADO,
            descricao=f"Total alterado manualmente de {total_anterior} para {novo_total} (calculado: {total_calculado})",
            usuario_id=usuario_id,
        )
        self.repo.confirmar_alteracao(pedido, versao_lida)

        if novo_total != total_calculado:
            logger.warning(
                f"[PedidoAdmin] Pedido {pedido_id}: total manual {novo_total} diverge do calculado {total_calculado}"
            )
        else:
            logger.info(f"[PedidoAdmin] Pedido {pedido_id}: total alterado para {novo_total}")
        return pedido

    def adicionar_item(
        self,
        pedido_id: int,
        *,
        produto_id: int,
        quantidade: int = 1,
        preco: Optional[Decimal] = None,
        complemento_ids: Optional[List[int]] = None,
        versao_esperada: Optional[int] = None,
        usuario_id: Optional[int] = None,
    ) -> PedidoModel:
        pedido = obter_pedido_ou_404(self.repo, pedido_id, for_update=True)
        versao_lida = pedido.versao
        verificar_versao(pedido, versao_esperada)
        garantir_editavel(pedido, "adicionar itens")

        item = montar_item_catalogo(
            self.produto_contract,
            self.complemento_contract,
            produto_id=produto_id,
            quantidade=quantidade,
            preco=preco,
            complemento_ids=complemento_ids,
        )
        pedido.itens.append(item)
        self.repo.add_historico(
            pedido,
            TipoOperacaoPedido.ITEM_ADICIONADO,
            descricao=f"Produto {produto_id} adicionado: {quantidade} x {item.preco_unitario}",
            usuario_id=usuario_id,
        )
        self._recalcular_total(pedido, usuario_id)
        self.repo.confirmar_alteracao(pedido, versao_lida)

        logger.info(
            f"[PedidoAdmin] Pedido {pedido_id}: item adicionado produto={produto_id} qtd={quantidade} "
            f"preco={item.preco_unitario} novo_total={pedido.valor_total}"
        )
        return pedido

    def remover_item(
        self,
        pedido_id: int,
        item_id: int,
        *,
        versao_esperada: Optional[int] = None,
        usuario_id: Optional[int] = None,
    ) -> PedidoModel:
        pedido = obter_pedido_ou_404(self.repo, pedido_id, for_update=True)
        versao_lida = pedido.versao
        verificar_versao(pedido, versao_esperada)
        garantir_editavel(pedido, "remover itens")

        item = next((i for i in pedido.itens if i.id == item_id), None)
        if item is None:
            raise NotFoundError(
                f"Item {item_id} não encontrado no pedido {pedido_id}",
                code="ITEM_NAO_ENCONTRADO",
            )

        descricao = f"Item {item_id} removido: {item.quantidade} x {quantizar_dinheiro(item.preco_unitario)}"
        pedido.itens.remove(item)
        self.repo.add_historico(
            pedido,
            TipoOperacaoPedido.ITEM_REMOVIDO,
            descricao=descricao,
            usuario_id=usuario_id,
        )
        self._recalcular_total(pedido, usuario_id)
        self.repo.confirmar_alteracao(pedido, versao_lida)

        logger.info(f"[PedidoAdmin] Pedido {pedido_id}: item {item_id} removido, novo_total={pedido.valor_total}")
        return pedido
