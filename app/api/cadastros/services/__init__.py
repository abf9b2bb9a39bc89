"""
Services de Cadastros
Centraliza todos os services relacionados a entidades de cadastro
"""

from app.api.cadastros.services.service_entregadores import EntregadoresService

__all__ = ["EntregadoresService"]
