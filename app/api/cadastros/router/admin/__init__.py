from .router_entregadores import router as router_entregadores

__all__ = [
    "router_entregadores",
]
