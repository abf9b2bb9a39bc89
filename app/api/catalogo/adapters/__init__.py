from app.api.catalogo.adapters.produto_adapter import ProdutoAdapter
from app.api.catalogo.adapters.complemento_adapter import ComplementoAdapter

__all__ = ["ProdutoAdapter", "ComplementoAdapter"]
