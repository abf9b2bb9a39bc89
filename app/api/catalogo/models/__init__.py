from app.api.catalogo.models.model_produto import ProdutoModel, TipoItemPersonalizado
from app.api.catalogo.models.model_complemento import ComplementoModel

__all__ = [
    "ProdutoModel",
    "TipoItemPersonalizado",
    "ComplementoModel",
]
