from app.api.catalogo.models import ProdutoModel, TipoItemPersonalizado
from app.database.init_db import criar_produtos_personalizados_padrao, inicializar_banco


def test_seed_de_produtos_personalizados_e_idempotente(db):
    db.query(ProdutoModel).filter(ProdutoModel.tipo_personalizado.isnot(None)).delete()
    db.commit()

    inicializar_banco()
    criar_produtos_personalizados_padrao()

    tipos = [
        p.tipo_personalizado
        for p in db.query(ProdutoModel).filter(ProdutoModel.tipo_personalizado.isnot(None)).all()
    ]
    assert sorted(t.value for t in tipos) == sorted(t.value for t in TipoItemPersonalizado)
