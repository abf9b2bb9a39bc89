from typing import Optional, List, Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_entregador import EntregadorModel
from app.api.pedidos.models.model_pedido import PedidoModel, StatusPedido


class EntregadorRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[EntregadorModel]:
        return self.db.query(EntregadorModel).order_by(EntregadorModel.created_at.desc(), EntregadorModel.id.desc()).all()

    def get(self, id_: int) -> Optional[EntregadorModel]:
        return self.db.get(EntregadorModel, id_)

    def get_by_telefone(self, telefone: str) -> Optional[EntregadorModel]:
        return self.db.query(EntregadorModel).filter(EntregadorModel.telefone == telefone).first()

    def total_entregas_por_entregador(self, entregador_ids: List[int]) -> Dict[int, int]:
        """Quantidade de pedidos entregues por entregador."""
        if not entregador_ids:
            return {}
        rows = (
            self.db.query(PedidoModel.entregador_id, func.count(PedidoModel.id))
            .filter(
                PedidoModel.entregador_id.in_(entregador_ids),
                PedidoModel.status == StatusPedido.DELIVERED,
            )
            .group_by(PedidoModel.entregador_id)
            .all()
        )
        return {entregador_id: total for entregador_id, total in rows}

    def create(self, **data) -> EntregadorModel:
        obj = EntregadorModel(**data)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def update(self, obj: EntregadorModel, **data) -> EntregadorModel:
        for f, v in data.items():
            setattr(obj, f, v)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj: EntregadorModel):
        self.db.delete(obj)
        self.db.commit()
