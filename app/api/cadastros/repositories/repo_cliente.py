from typing import Optional

from sqlalchemy.orm import Session

from app.api.cadastros.models.model_usuario import UsuarioModel
from app.api.cadastros.models.model_endereco import EnderecoModel


class ClienteRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_usuario(self, usuario_id: int) -> Optional[UsuarioModel]:
        return self.db.get(UsuarioModel, usuario_id)

    def get_endereco(self, endereco_id: int) -> Optional[EnderecoModel]:
        return self.db.get(EnderecoModel, endereco_id)
