from app.api.catalogo.repositories.repo_produto import ProdutoRepository
from app.api.catalogo.repositories.repo_complemento import ComplementoRepository

__all__ = ["ProdutoRepository", "ComplementoRepository"]
