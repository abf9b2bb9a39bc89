from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class EnderecoModel(Base):
    __tablename__ = "enderecos"

    id = Column(Integer, primary_key=True, autoincrement=True)

    usuario_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)

    rua         = Column(String(120), nullable=False)
    numero      = Column(String(10),  nullable=False)
    complemento = Column(String(50),  nullable=True)
    bairro      = Column(String(60),  nullable=False)
    telefone    = Column(String(20),  nullable=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    usuario = relationship("UsuarioModel", back_populates="enderecos")
