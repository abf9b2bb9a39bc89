"""
Repositories de Cadastros
Centraliza todos os repositories relacionados a entidades de cadastro
"""

from app.api.cadastros.repositories.repo_cliente import ClienteRepository
from app.api.cadastros.repositories.repo_entregadores import EntregadorRepository

__all__ = [
    "ClienteRepository",
    "EntregadorRepository",
]
