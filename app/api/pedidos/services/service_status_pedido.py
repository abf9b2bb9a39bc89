"""
Motor de transições de status dos pedidos.

Aplica a tabela de `app.api.pedidos.utils.transicoes_status` com as
pré-condições de cada passo (entregador ao sair para entrega, confirmação ao
marcar como entregue) e grava a mudança com compare-and-set da versão.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.api.cadastros.contracts.entregador_contract import IEntregadorContract, EntregadorDTO
from app.api.pedidos.models.model_pedido import PedidoModel, StatusPedido, TipoEntrega
from app.api.pedidos.models.model_pedido_historico import TipoOperacaoPedido
from app.api.pedidos.repositories.repo_pedidos import PedidoRepository
from app.api.pedidos.services.service_pedido_helpers import obter_pedido_ou_404, verificar_versao
from app.api.pedidos.utils.pedido_notification_helper import notificar_mudanca_status
from app.api.pedidos.utils.transicoes_status import (
    STATUS_CANCELAVEIS,
    exige_entregador,
    pode_cancelar,
    proximo_status as calcular_proximo_status,
)
from app.config.settings import EXIGIR_CONFIRMACAO_ENTREGA
from app.core.exceptions import ConflictError, InvalidStateError, NotFoundError, ValidationError
from app.utils.logger import logger
from app.utils.prometheus_metrics import record_transicao_pedido


class StatusPedidoService:
    def __init__(
        self,
        db: Session,
        entregador_contract: IEntregadorContract,
        *,
        exigir_confirmacao_entrega: bool = EXIGIR_CONFIRMACAO_ENTREGA,
    ):
        self.db = db
        self.repo = PedidoRepository(db)
        self.entregador_contract = entregador_contract
        self.exigir_confirmacao_entrega = exigir_confirmacao_entrega

    # ---------------- helpers ----------------
    def _destino(self, pedido: PedidoModel) -> StatusPedido:
        try:
            return calcular_proximo_status(pedido.status, pedido.tipo_entrega)
        except ValueError as e:
            raise InvalidStateError(str(e), code="STATUS_INCOMPATIVEL")

    def _validar_entregador(self, entregador_id: int) -> EntregadorDTO:
        entregador = self.entregador_contract.obter_entregador(entregador_id)
        if not entregador:
            raise NotFoundError(f"Entregador {entregador_id} não encontrado", code="ENTREGADOR_NAO_ENCONTRADO")
        if not entregador.ativo:
            raise ValidationError(
                f"Entregador {entregador.nome} está inativo",
                field="entregador_id",
                code="ENTREGADOR_INATIVO",
            )
        return entregador

    def _exige_confirmacao(self, destino: StatusPedido) -> bool:
        return self.exigir_confirmacao_entrega and destino == StatusPedido.DELIVERED

    # ---------------- operações ----------------
    def propor_transicao(self, pedido_id: int) -> dict:
        """Prévia (somente leitura) do próximo passo, para o painel montar o botão/modal certo."""
        pedido = obter_pedido_ou_404(self.repo, pedido_id)
        destino = self._destino(pedido)
        return {
            "pedido_id": pedido.id,
            "status_atual": pedido.status,
            "proximo_status": destino,
            "terminal": pedido.is_terminal,
            "exige_entregador": (not pedido.is_terminal) and exige_entregador(pedido.status, pedido.tipo_entrega),
            "exige_confirmacao": (not pedido.is_terminal) and self._exige_confirmacao(destino),
            "versao": pedido.versao,
        }

    def avancar_status(
        self,
        pedido_id: int,
        *,
        entregador_id: Optional[int] = None,
        status_esperado: Optional[StatusPedido] = None,
        proximo_status: Optional[StatusPedido] = None,
        confirmado: bool = False,
        versao_esperada: Optional[int] = None,
        usuario_id: Optional[int] = None,
    ) -> PedidoModel:
        """
        Avança o pedido um passo no fluxo.

        - Pedido terminal: não faz nada e devolve o pedido como está.
        - being_prepared -> on_the_way (delivery): exige entregador ativo.
        - -> delivered: exige `confirmado=True` quando EXIGIR_CONFIRMACAO_ENTREGA.
        - `status_esperado`/`proximo_status`/`versao_esperada` divergentes: ConflictError.
        """
        pedido = obter_pedido_ou_404(self.repo, pedido_id, for_update=True)
        versao_lida = pedido.versao
        atual = StatusPedido(pedido.status)

        verificar_versao(pedido, versao_esperada)
        if status_esperado is not None and StatusPedido(status_esperado) != atual:
            raise ConflictError(
                f"Pedido {pedido_id} está em {atual.value}, não em {StatusPedido(status_esperado).value}",
                code="STATUS_DESATUALIZADO",
                status_atual=atual.value,
            )

        if pedido.is_terminal:
            logger.info(f"[StatusPedido] Pedido {pedido_id} já está em status terminal {atual.value}; nada a fazer")
            return pedido

        destino = self._destino(pedido)
        if proximo_status is not None and StatusPedido(proximo_status) != destino:
            raise ConflictError(
                f"O próximo status do pedido {pedido_id} é {destino.value}, não {StatusPedido(proximo_status).value}",
                code="STATUS_DESATUALIZADO",
                status_atual=atual.value,
                proximo_status=destino.value,
            )

        entregador: Optional[EntregadorDTO] = None
        if exige_entregador(atual, pedido.tipo_entrega):
            if entregador_id is None:
                raise InvalidStateError(
                    "Selecione um entregador para enviar o pedido",
                    code="ENTREGADOR_OBRIGATORIO",
                )
            entregador = self._validar_entregador(entregador_id)
        elif entregador_id is not None:
            motivo = (
                "pedidos de retirada não têm entregador"
                if pedido.tipo_entrega == TipoEntrega.PICKUP
                else "o entregador só é definido quando o pedido sai para entrega"
            )
            raise ValidationError(f"entregador_id não é permitido nesta transição: {motivo}", field="entregador_id")

        if self._exige_confirmacao(destino) and not confirmado:
            raise InvalidStateError(
                "Confirme a entrega do pedido antes de marcá-lo como entregue",
                code="CONFIRMACAO_NECESSARIA",
            )

        pedido.status = destino
        if entregador is not None:
            pedido.entregador_id = entregador.id
            self.repo.add_historico(
                pedido,
                TipoOperacaoPedido.ENTREGADOR_ASSOCIADO,
                descricao=f"Entregador {entregador.nome} (id={entregador.id}) associado ao pedido",
                usuario_id=usuario_id,
            )
        self.repo.add_historico(
            pedido,
            TipoOperacaoPedido.STATUS_ALTERADO,
            status_anterior=atual,
            status_novo=destino,
            descricao=f"Status alterado de {atual.value} para {destino.value}",
            usuario_id=usuario_id,
        )
        self.repo.confirmar_alteracao(pedido, versao_lida)

        logger.info(
            f"[StatusPedido] Pedido {pedido_id}: {atual.value} -> {destino.value}"
            + (f" entregador_id={entregador.id}" if entregador else "")
        )
        record_transicao_pedido(atual.value, destino.value)
        notificar_mudanca_status(pedido, atual, usuario_id=usuario_id)
        return pedido

    def cancelar(
        self,
        pedido_id: int,
        *,
        motivo: Optional[str] = None,
        versao_esperada: Optional[int] = None,
        usuario_id: Optional[int] = None,
        pedido: Optional[PedidoModel] = None,
    ) -> PedidoModel:
        """Cancela o pedido; permitido apenas antes de sair para entrega/ficar pronto."""
        if pedido is None:
            pedido = obter_pedido_ou_404(self.repo, pedido_id, for_update=True)
        versao_lida = pedido.versao
        atual = StatusPedido(pedido.status)

        verificar_versao(pedido, versao_esperada)
        if not pode_cancelar(atual):
            permitidos = ", ".join(sorted(s.value for s in STATUS_CANCELAVEIS))
            raise InvalidStateError(
                f"Pedido {pedido_id} não pode ser cancelado no status {atual.value} (permitido: {permitidos})",
                code="CANCELAMENTO_NAO_PERMITIDO",
                status=atual.value,
            )

        pedido.status = StatusPedido.CANCELED
        descricao = "Pedido cancelado" + (f": {motivo}" if motivo else "")
        self.repo.add_historico(
            pedido,
            TipoOperacaoPedido.PEDIDO_CANCELADO,
            status_anterior=atual,
            status_novo=StatusPedido.CANCELED,
            descricao=descricao,
            usuario_id=usuario_id,
        )
        self.repo.confirmar_alteracao(pedido, versao_lida)

        logger.info(f"[StatusPedido] Pedido {pedido_id} cancelado (status anterior={atual.value})")
        record_transicao_pedido(atual.value, StatusPedido.CANCELED.value)
        notificar_mudanca_status(pedido, atual, usuario_id=usuario_id)
        return pedido
