from typing import Optional

from sqlalchemy.orm import Session

from app.api.cadastros.contracts.cliente_contract import (
    IClienteContract,
    UsuarioDTO,
    EnderecoDTO,
)
from app.api.cadastros.repositories.repo_cliente import ClienteRepository


class ClienteAdapter(IClienteContract):
    """Implementação do contrato de clientes baseada no ClienteRepository."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClienteRepository(db)

    def obter_usuario(self, usuario_id: int) -> Optional[UsuarioDTO]:
        u = self.repo.get_usuario(usuario_id)
        if not u:
            return None
        return UsuarioDTO(id=u.id, nome=u.nome, telefone=u.telefone)

    def obter_endereco(self, endereco_id: int) -> Optional[EnderecoDTO]:
        e = self.repo.get_endereco(endereco_id)
        if not e:
            return None
        return EnderecoDTO(
            id=e.id,
            usuario_id=e.usuario_id,
            rua=e.rua,
            numero=e.numero,
            complemento=e.complemento,
            bairro=e.bairro,
            telefone=e.telefone,
        )
