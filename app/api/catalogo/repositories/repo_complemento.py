from typing import List

from sqlalchemy.orm import Session

from app.api.catalogo.models.model_complemento import ComplementoModel


class ComplementoRepository:
    def __init__(self, db: Session):
        self.db = db

    def buscar_por_ids(self, complemento_ids: List[int]) -> List[ComplementoModel]:
        if not complemento_ids:
            return []
        return (
            self.db.query(ComplementoModel)
            .filter(ComplementoModel.id.in_(set(complemento_ids)))
            .all()
        )
