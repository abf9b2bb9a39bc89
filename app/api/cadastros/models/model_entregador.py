from sqlalchemy import Column, String, Integer, Boolean, DateTime
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class EntregadorModel(Base):
    __tablename__ = "entregadores"

    id = Column(Integer, primary_key=True)
    nome = Column(String(100), nullable=False)

    # Apenas dígitos; único para evitar cadastro duplicado do mesmo entregador
    telefone = Column(String(20), nullable=False, unique=True)
    email = Column(String(120), nullable=True)
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)

    # Ao excluir o entregador os pedidos mantêm o histórico com entregador_id nulo
    pedidos = relationship("PedidoModel", back_populates="entregador")
