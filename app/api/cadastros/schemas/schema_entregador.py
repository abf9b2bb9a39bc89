from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, constr


class EntregadorCreate(BaseModel):
    nome: constr(strip_whitespace=True, min_length=1, max_length=100)
    telefone: constr(strip_whitespace=True, min_length=1, max_length=30)
    email: Optional[constr(strip_whitespace=True, max_length=120)] = None
    ativo: bool = True


class EntregadorUpdate(BaseModel):
    nome: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    telefone: Optional[constr(strip_whitespace=True, min_length=1, max_length=30)] = None
    email: Optional[constr(strip_whitespace=True, max_length=120)] = None
    ativo: Optional[bool] = None


class EntregadorOut(BaseModel):
    id: int
    nome: str
    telefone: str
    email: Optional[str] = None
    ativo: bool
    total_entregas: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
