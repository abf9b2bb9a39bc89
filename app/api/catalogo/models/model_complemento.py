from sqlalchemy import Column, Integer, String, Boolean, DateTime

from app.database.db_connection import Base
from app.utils.database_utils import now_trimmed


class ComplementoModel(Base):
    """Complemento (cobertura, fruta, adicional) escolhido ao montar açaí/sorvete."""
    __tablename__ = "complementos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(100), nullable=False)
    ativo = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, default=now_trimmed, nullable=False)
    updated_at = Column(DateTime, default=now_trimmed, onupdate=now_trimmed, nullable=False)
