from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class UsuarioModel(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(100), nullable=False)
    email = Column(String(120), nullable=True, unique=True)
    telefone = Column(String(20), nullable=True)

    # user (cliente), admin ou master
    type_user = Column(String(20), nullable=False, default="user")

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    enderecos = relationship("EnderecoModel", back_populates="usuario", cascade="all, delete-orphan")
