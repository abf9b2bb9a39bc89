# app/api/cadastros/router/router.py

from fastapi import APIRouter

from app.api.cadastros.router.admin import router_entregadores

api_cadastros = APIRouter(
    tags=["API - Cadastros"]
)

# Routers para admin (usam require_admin)
api_cadastros.include_router(router_entregadores)
