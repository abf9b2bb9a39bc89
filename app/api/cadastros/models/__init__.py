"""
Models de Cadastros
Centraliza todos os models relacionados a entidades de cadastro
"""

# Importar todos os models para garantir registro no SQLAlchemy
from app.api.cadastros.models.model_usuario import UsuarioModel
from app.api.cadastros.models.model_endereco import EnderecoModel
from app.api.cadastros.models.model_entregador import EntregadorModel

__all__ = [
    "UsuarioModel",
    "EnderecoModel",
    "EntregadorModel",
]
