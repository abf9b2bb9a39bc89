from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, List

from sqlalchemy import func, update
from sqlalchemy.orm import Session, selectinload

from app.api.pedidos.models.model_pedido import (
    PedidoModel,
    StatusPedido,
    TipoEntrega,
)
from app.api.pedidos.models.model_pedido_historico import (
    PedidoHistoricoModel,
    TipoOperacaoPedido,
)
from app.core.exceptions import ConflictError
from app.utils.database_utils import now_trimmed
from app.utils.logger import logger


class PedidoRepository:
    def __init__(self, db: Session):
        self.db = db

    # ------------- Queries -------------
    def get_pedido(self, pedido_id: int, *, for_update: bool = False) -> Optional[PedidoModel]:
        query = (
            self.db.query(PedidoModel)
            .options(selectinload(PedidoModel.itens))
            .filter(PedidoModel.id == pedido_id)
        )
        if for_update:
            # Bloqueia a linha até o fim da transação (ignorado em SQLite)
            query = query.with_for_update(of=PedidoModel)
        return query.first()

    def list_pedidos(
        self,
        *,
        status: Optional[List[StatusPedido]] = None,
        tipo_entrega: Optional[TipoEntrega] = None,
        usuario_id: Optional[int] = None,
        data_inicio: Optional[date] = None,
        data_fim: Optional[date] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[PedidoModel]:
        query = self.db.query(PedidoModel).options(selectinload(PedidoModel.itens))
        if status:
            query = query.filter(PedidoModel.status.in_(status))
        if tipo_entrega is not None:
            query = query.filter(PedidoModel.tipo_entrega == tipo_entrega)
        if usuario_id is not None:
            query = query.filter(PedidoModel.usuario_id == usuario_id)
        if data_inicio is not None:
            query = query.filter(PedidoModel.created_at >= datetime.combine(data_inicio, time.min))
        if data_fim is not None:
            # fim inclusivo: até o início do dia seguinte
            query = query.filter(PedidoModel.created_at < datetime.combine(data_fim + timedelta(days=1), time.min))
        return (
            query.order_by(PedidoModel.created_at.desc(), PedidoModel.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def contar_por_status(self, status: StatusPedido) -> int:
        return (
            self.db.query(func.count(PedidoModel.id))
            .filter(PedidoModel.status == status)
            .scalar()
        ) or 0

    def get_historico(self, pedido_id: int, limit: int = 100) -> List[PedidoHistoricoModel]:
        """Busca histórico de um pedido (mais recente primeiro)."""
        return (
            self.db.query(PedidoHistoricoModel)
            .filter(PedidoHistoricoModel.pedido_id == pedido_id)
            .order_by(PedidoHistoricoModel.created_at.desc(), PedidoHistoricoModel.id.desc())
            .limit(limit)
            .all()
        )

    # -------------------- Mutations -------------------
    def add(self, pedido: PedidoModel) -> PedidoModel:
        self.db.add(pedido)
        self.db.flush()
        return pedido

    def add_historico(
        self,
        pedido: PedidoModel,
        tipo_operacao: TipoOperacaoPedido,
        *,
        status_anterior=None,
        status_novo=None,
        descricao: str | None = None,
        usuario_id: int | None = None,
    ) -> PedidoHistoricoModel:
        """Adiciona um registro ao histórico do pedido (persistido no próximo flush)."""
        historico = PedidoHistoricoModel(
            tipo_operacao=tipo_operacao,
            status_anterior=getattr(status_anterior, "value", status_anterior),
            status_novo=getattr(status_novo, "value", status_novo),
            descricao=descricao,
            usuario_id=usuario_id,
        )
        pedido.historico.append(historico)
        return historico

    def confirmar_alteracao(self, pedido: PedidoModel, versao_lida: int) -> PedidoModel:
        """
        Grava as alterações pendentes do pedido e avança a versão com
        compare-and-set. Se outra transação alterou o pedido depois da leitura,
        nenhuma linha é afetada: desfaz tudo e levanta ConflictError.
        """
        pedido_id = pedido.id
        self.db.flush()
        result = self.db.execute(
            update(PedidoModel)
            .where(PedidoModel.id == pedido_id, PedidoModel.versao == versao_lida)
            .values(versao=PedidoModel.versao + 1, updated_at=now_trimmed())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            self.db.rollback()
            logger.warning(
                f"[PedidoRepository] Conflito de concorrência no pedido {pedido_id} (versao lida={versao_lida})"
            )
            raise ConflictError(
                "O pedido foi alterado por outra operação. Recarregue e tente novamente.",
                code="PEDIDO_ALTERADO_CONCORRENTEMENTE",
                pedido_id=pedido_id,
            )
        self.commit()
        self.db.refresh(pedido)
        return pedido

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
