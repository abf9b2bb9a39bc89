from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db

from app.api.catalogo.contracts.produto_contract import IProdutoContract
from app.api.catalogo.contracts.complemento_contract import IComplementoContract
from .cliente_contract import IClienteContract
from .entregador_contract import IEntregadorContract

from app.api.catalogo.adapters.produto_adapter import ProdutoAdapter
from app.api.catalogo.adapters.complemento_adapter import ComplementoAdapter
from app.api.cadastros.adapters.cliente_adapter import ClienteAdapter
from app.api.cadastros.adapters.entregador_adapter import EntregadorAdapter


def get_produto_contract(db: Session = Depends(get_db)) -> IProdutoContract:
    return ProdutoAdapter(db)


def get_complemento_contract(db: Session = Depends(get_db)) -> IComplementoContract:
    return ComplementoAdapter(db)


def get_cliente_contract(db: Session = Depends(get_db)) -> IClienteContract:
    return ClienteAdapter(db)


def get_entregador_contract(db: Session = Depends(get_db)) -> IEntregadorContract:
    return EntregadorAdapter(db)
