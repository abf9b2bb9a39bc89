import os
import tempfile
from decimal import Decimal

# Configuração precisa existir antes de importar app.* (settings é lido no import)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "chave-de-teste")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="pedidos-logs-"))
os.environ["EXIGIR_CONFIRMACAO_ENTREGA"] = "true"

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.main import app
from app.config.settings import SECRET_KEY, ALGORITHM
from app.database.db_connection import Base, SessionLocal, engine
from app.api.cadastros.adapters.cliente_adapter import ClienteAdapter
from app.api.cadastros.adapters.entregador_adapter import EntregadorAdapter
from app.api.cadastros.models import UsuarioModel, EnderecoModel, EntregadorModel
from app.api.catalogo.adapters import ProdutoAdapter, ComplementoAdapter
from app.api.catalogo.models import ProdutoModel, ComplementoModel, TipoItemPersonalizado
from app.api.pedidos.services.service_pedido import PedidoService
from app.api.pedidos.services.service_pedido_admin import PedidoAdminService
from app.api.pedidos.services.service_status_pedido import StatusPedidoService

CLIENTE_ID = 1
ADMIN_ID = 2
OUTRO_CLIENTE_ID = 3
ENDERECO_ID = 1

PRODUTO_A_ID = 1
PRODUTO_INATIVO_ID = 2
PRODUTO_B_ID = 6

ENTREGADOR_ID = 5
ENTREGADOR_INATIVO_ID = 6


def _seed(db):
    db.add_all([
        UsuarioModel(id=CLIENTE_ID, nome="Maria Cliente", email="maria@teste.com",
                     telefone="(11) 98888-7777", type_user="user"),
        UsuarioModel(id=ADMIN_ID, nome="Ana Admin", email="admin@teste.com", type_user="admin"),
        UsuarioModel(id=OUTRO_CLIENTE_ID, nome="João Cliente", email="joao@teste.com", type_user="user"),
    ])
    db.flush()
    db.add(EnderecoModel(id=ENDERECO_ID, usuario_id=CLIENTE_ID, rua="Rua das Flores", numero="100",
                         complemento="Apto 12", bairro="Centro"))
    db.add_all([
        ProdutoModel(id=PRODUTO_A_ID, nome="Açaí 500ml", preco=Decimal("10.00"), ativo=True),
        ProdutoModel(id=PRODUTO_INATIVO_ID, nome="Copo Térmico", preco=Decimal("5.00"), ativo=False),
        ProdutoModel(id=3, nome="Açaí Personalizado", preco=0, ativo=True,
                     tipo_personalizado=TipoItemPersonalizado.ACAI),
        ProdutoModel(id=4, nome="Sorvete Personalizado", preco=0, ativo=True,
                     tipo_personalizado=TipoItemPersonalizado.SORVETE),
        ProdutoModel(id=5, nome="Produto Personalizado", preco=0, ativo=True,
                     tipo_personalizado=TipoItemPersonalizado.PRODUTO),
        ProdutoModel(id=PRODUTO_B_ID, nome="Milkshake", preco=Decimal("12.50"), ativo=True),
    ])
    db.add_all([
        ComplementoModel(id=3, nome="Leite em pó", ativo=True),
        ComplementoModel(id=7, nome="Granola", ativo=True),
        ComplementoModel(id=8, nome="Paçoca", ativo=False),
    ])
    db.add_all([
        EntregadorModel(id=ENTREGADOR_ID, nome="Carlos Moto", telefone="11977776666", ativo=True),
        EntregadorModel(id=ENTREGADOR_INATIVO_ID, nome="Pedro Bike", telefone="11955554444", ativo=False),
    ])
    db.commit()


@pytest.fixture(autouse=True)
def banco():
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        _seed(db)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _token(usuario_id: int) -> str:
    return jwt.encode({"sub": str(usuario_id)}, SECRET_KEY, algorithm=ALGORITHM)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def cliente_headers():
    return {"Authorization": f"Bearer {_token(CLIENTE_ID)}"}


@pytest.fixture
def outro_cliente_headers():
    return {"Authorization": f"Bearer {_token(OUTRO_CLIENTE_ID)}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {_token(ADMIN_ID)}"}


@pytest.fixture
def status_service(db):
    return StatusPedidoService(db, EntregadorAdapter(db), exigir_confirmacao_entrega=True)


@pytest.fixture
def pedido_service(db, status_service):
    return PedidoService(
        db,
        produto_contract=ProdutoAdapter(db),
        complemento_contract=ComplementoAdapter(db),
        cliente_contract=ClienteAdapter(db),
        status_service=status_service,
    )


@pytest.fixture
def admin_service(db, pedido_service, status_service):
    return PedidoAdminService(
        db,
        produto_contract=ProdutoAdapter(db),
        complemento_contract=ComplementoAdapter(db),
        pedido_service=pedido_service,
        status_service=status_service,
    )
