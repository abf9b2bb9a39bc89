import logging

from sqlalchemy import text

from .db_connection import engine, Base, SessionLocal

logger = logging.getLogger(__name__)

PRODUTOS_PERSONALIZADOS_PADRAO = [
    {"nome": "Açaí Personalizado", "tipo": "customAcai"},
    {"nome": "Sorvete Personalizado", "tipo": "customSorvete"},
    {"nome": "Produto Personalizado", "tipo": "customProduct"},
]


def configurar_timezone():
    """Configura o timezone do banco de dados para America/Sao_Paulo (apenas PostgreSQL)."""
    if engine.dialect.name != "postgresql":
        logger.info(f"ℹ️ Dialeto {engine.dialect.name}: configuração de timezone ignorada")
        return
    with engine.begin() as conn:
        conn.execute(text("SET timezone = 'America/Sao_Paulo'"))
        timezone_atual = conn.execute(text("SHOW timezone")).scalar()
        logger.info(f"✅ Timezone do banco configurado: {timezone_atual}")


def importar_models():
    # ─── Models Cadastros ────────────────────────────────────────────
    from app.api.cadastros.models.model_usuario import UsuarioModel
    from app.api.cadastros.models.model_endereco import EnderecoModel
    from app.api.cadastros.models.model_entregador import EntregadorModel
    # ─── Models Catálogo ─────────────────────────────────────────────
    from app.api.catalogo.models.model_produto import ProdutoModel
    from app.api.catalogo.models.model_complemento import ComplementoModel
    # ─── Models Pedidos ──────────────────────────────────────────────
    from app.api.pedidos.models.model_pedido import PedidoModel
    from app.api.pedidos.models.model_pedido_item import PedidoItemModel
    from app.api.pedidos.models.model_pedido_historico import PedidoHistoricoModel

    logger.info("📦 Models importados com sucesso.")


def criar_tabelas():
    importar_models()
    tabelas = list(Base.metadata.sorted_tables)
    logger.info(f"📊 Total de tabelas registradas: {len(tabelas)}")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("✅ create_all concluído (%s tabelas garantidas).", len(tabelas))


def criar_produtos_personalizados_padrao():
    """
    Garante os produtos "placeholder" usados pelos itens personalizados
    (açaí, sorvete e produto montado). Idempotente: só cria o que falta.
    """
    from app.api.catalogo.models.model_produto import ProdutoModel, TipoItemPersonalizado

    with SessionLocal() as session:
        criados = 0
        for dados in PRODUTOS_PERSONALIZADOS_PADRAO:
            tipo = TipoItemPersonalizado(dados["tipo"])
            existente = (
                session.query(ProdutoModel)
                .filter(ProdutoModel.tipo_personalizado == tipo)
                .first()
            )
            if existente:
                continue
            session.add(
                ProdutoModel(
                    nome=dados["nome"],
                    preco=0,
                    ativo=True,
                    tipo_personalizado=tipo,
                )
            )
            criados += 1
        session.commit()

    logger.info(f"✅ Produtos personalizados padrão criados/verificados ({criados} novos).")


def inicializar_banco():
    logger.info("🚀 Iniciando processo de inicialização do banco de dados...")

    logger.info("📦 Passo 1/3: Configurando timezone do banco...")
    configurar_timezone()

    logger.info("📋 Passo 2/3: Criando/verificando todas as tabelas...")
    criar_tabelas()

    logger.info("🍧 Passo 3/3: Criando/verificando produtos personalizados padrão...")
    criar_produtos_personalizados_padrao()

    logger.info("✅ Banco inicializado com sucesso.")
