from typing import Optional

from sqlalchemy.orm import Session

from app.api.catalogo.models.model_produto import ProdutoModel, TipoItemPersonalizado


class ProdutoRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, produto_id: int) -> Optional[ProdutoModel]:
        return self.db.get(ProdutoModel, produto_id)

    def get_por_tipo_personalizado(self, tipo: TipoItemPersonalizado) -> Optional[ProdutoModel]:
        return (
            self.db.query(ProdutoModel)
            .filter(ProdutoModel.tipo_personalizado == tipo)
            .first()
        )
