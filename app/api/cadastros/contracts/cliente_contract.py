from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class UsuarioDTO(BaseModel):
    """DTO do cliente (usuário) dono do pedido."""
    id: int
    nome: str
    telefone: Optional[str] = None


class EnderecoDTO(BaseModel):
    """DTO de endereço usado para montar o snapshot de entrega do pedido."""
    id: int
    usuario_id: int
    rua: str
    numero: str
    complemento: Optional[str] = None
    bairro: str
    telefone: Optional[str] = None


class IClienteContract(ABC):
    """Contrato para acesso a clientes e seus endereços do contexto Cadastros."""

    @abstractmethod
    def obter_usuario(self, usuario_id: int) -> Optional[UsuarioDTO]:
        raise NotImplementedError

    @abstractmethod
    def obter_endereco(self, endereco_id: int) -> Optional[EnderecoDTO]:
        raise NotImplementedError
