from typing import Optional

from sqlalchemy.orm import Session

from app.api.catalogo.contracts.produto_contract import IProdutoContract, ProdutoDTO
from app.api.catalogo.models.model_produto import ProdutoModel, TipoItemPersonalizado
from app.api.catalogo.repositories.repo_produto import ProdutoRepository


class ProdutoAdapter(IProdutoContract):
    """Implementação do contrato de produtos baseada nos repositórios atuais."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProdutoRepository(db)

    def _to_produto_dto(self, produto: ProdutoModel) -> ProdutoDTO:
        tipo = produto.tipo_personalizado
        return ProdutoDTO(
            id=produto.id,
            nome=produto.nome,
            preco=produto.preco,
            ativo=bool(produto.ativo),
            tipo_personalizado=tipo.value if tipo is not None else None,
        )

    def obter_produto(self, produto_id: int) -> Optional[ProdutoDTO]:
        produto = self.repo.get(produto_id)
        if not produto:
            return None
        return self._to_produto_dto(produto)

    def obter_produto_personalizado(self, tipo: str) -> Optional[ProdutoDTO]:
        produto = self.repo.get_por_tipo_personalizado(TipoItemPersonalizado(tipo))
        if not produto:
            return None
        return self._to_produto_dto(produto)
