from fastapi import Depends
from sqlalchemy.orm import Session

from app.database.db_connection import get_db
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.pedidos.services.service_pedido_admin import PedidoAdminService
from app.api.pedidos.services.service_status_pedido import StatusPedidoService
from app.api.cadastros.contracts.cliente_contract import IClienteContract
from app.api.cadastros.contracts.entregador_contract import IEntregadorContract
from app.api.catalogo.contracts.produto_contract import IProdutoContract
from app.api.catalogo.contracts.complemento_contract import IComplementoContract
from app.api.cadastros.contracts.dependencies import (
    get_cliente_contract,
    get_complemento_contract,
    get_entregador_contract,
    get_produto_contract,
)


def get_status_pedido_service(
    db: Session = Depends(get_db),
    entregador_contract: IEntregadorContract = Depends(get_entregador_contract),
) -> StatusPedidoService:
    return StatusPedidoService(db, entregador_contract)


def get_pedido_service(
    db: Session = Depends(get_db),
    produto_contract: IProdutoContract = Depends(get_produto_contract),
    complemento_contract: IComplementoContract = Depends(get_complemento_contract),
    cliente_contract: IClienteContract = Depends(get_cliente_contract),
    status_service: StatusPedidoService = Depends(get_status_pedido_service),
) -> PedidoService:
    return PedidoService(
        db,
        produto_contract=produto_contract,
        complemento_contract=complemento_contract,
        cliente_contract=cliente_contract,
        status_service=status_service,
    )


def get_pedido_admin_service(
    db: Session = Depends(get_db),
    produto_contract: IProdutoContract = Depends(get_produto_contract),
    complemento_contract: IComplementoContract = Depends(get_complemento_contract),
    pedido_service: PedidoService = Depends(get_pedido_service),
    status_service: StatusPedidoService = Depends(get_status_pedido_service),
) -> PedidoAdminService:
    return PedidoAdminService(
        db,
        produto_contract=produto_contract,
        complemento_contract=complemento_contract,
        pedido_service=pedido_service,
        status_service=status_service,
    )
