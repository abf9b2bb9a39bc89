# app/core/admin_dependencies.py
"""
Autenticação das rotas de pedidos e entregadores.

O token é emitido pelo serviço de login da loja; aqui só validamos a
assinatura e carregamos o usuário (cliente ou atendente do painel).
"""

from fastapi import Depends, HTTPException, status, Request
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from app.api.cadastros.models.model_usuario import UsuarioModel
from app.config.settings import SECRET_KEY, ALGORITHM
from app.database.db_connection import get_db
from app.utils.logger import logger

TIPOS_PAINEL = ["admin", "master"]

token_invalido_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Sessão inválida ou expirada. Faça login novamente.",
    headers={"WWW-Authenticate": "Bearer"},
)

acesso_painel_exception = HTTPException(
    status_code=status.HTTP_403_FORBIDDEN,
    detail="Acesso restrito à equipe da loja",
)


def _extrair_usuario_id(request: Request) -> int:
    auth_header = request.headers.get("Authorization") or ""
    esquema, _, token = auth_header.partition(" ")
    if esquema != "Bearer" or not token:
        logger.warning(f"[Auth] Requisição sem Bearer token: {request.method} {request.url.path}")
        raise token_invalido_exception

    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM], options={"verify_sub": False})
        return int(payload["sub"])
    except (JWTError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"[Auth] Token recusado em {request.url.path}: {e}")
        raise token_invalido_exception


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> UsuarioModel:
    """Usuário dono do token (cliente no checkout, atendente no painel)."""
    usuario = db.get(UsuarioModel, _extrair_usuario_id(request))
    if not usuario:
        raise token_invalido_exception
    return usuario


def require_type_user(allowed_types: list[str]):
    """
    Restringe a rota aos tipos de usuário informados:

        @router.put("/{pedido_id}/status", dependencies=[Depends(require_type_user(["admin"]))])
    """

    def dependency(current_user: UsuarioModel = Depends(get_current_user)) -> UsuarioModel:
        if current_user.type_user not in allowed_types:
            logger.warning(
                f"[Auth] Usuário {current_user.id} ({current_user.type_user}) sem acesso; "
                f"exigido um de {allowed_types}"
            )
            raise acesso_painel_exception
        return current_user

    return dependency


# Painel de pedidos e cadastro de entregadores
require_admin = require_type_user(TIPOS_PAINEL)
