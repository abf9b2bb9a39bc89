"""
Erros de domínio da API.

Todos herdam de HTTPException para que os handlers globais tratem os casos
da mesma forma que os erros HTTP comuns, mas carregam um `code` estável no
detail para o frontend decidir o que mostrar.
"""
from typing import Any, Optional

from fastapi import HTTPException, status


class DomainError(HTTPException):
    status_code_padrao = status.HTTP_400_BAD_REQUEST
    code_padrao = "ERRO_DOMINIO"

    def __init__(self, message: str, *, code: Optional[str] = None, **extra: Any):
        self.code = code or self.code_padrao
        self.message = message
        detail = {"code": self.code, "message": message}
        detail.update({k: v for k, v in extra.items() if v is not None})
        super().__init__(status_code=self.status_code_padrao, detail=detail)


class ValidationError(DomainError):
    """Entrada malformada (quantidade < 1, preço <= 0, campo obrigatório ausente...)."""
    status_code_padrao = status.HTTP_400_BAD_REQUEST
    code_padrao = "VALIDACAO"

    def __init__(self, message: str, *, field: Optional[str] = None, code: Optional[str] = None, **extra: Any):
        self.field = field
        super().__init__(message, code=code, field=field, **extra)


class NotFoundError(DomainError):
    status_code_padrao = status.HTTP_404_NOT_FOUND
    code_padrao = "NAO_ENCONTRADO"


class InvalidStateError(DomainError):
    """Operação proibida pelo status atual do pedido."""
    status_code_padrao = status.HTTP_422_UNPROCESSABLE_ENTITY
    code_padrao = "ESTADO_INVALIDO"


class ConflictError(DomainError):
    """Escrita concorrente ou cliente com visão desatualizada do pedido."""
    status_code_padrao = status.HTTP_409_CONFLICT
    code_padrao = "CONFLITO"
