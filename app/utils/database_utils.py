from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from zoneinfo import ZoneInfo

CENTAVOS = Decimal("0.01")


def now_trimmed():
    """Retorna datetime atual em timezone de São Paulo, sem microsegundos"""
    tz_sp = ZoneInfo('America/Sao_Paulo')
    return datetime.now(tz_sp).replace(microsecond=0)


def quantizar_dinheiro(valor) -> Decimal:
    """Converte para Decimal com 2 casas (arredondamento comercial, meio para cima)."""
    if valor is None:
        return Decimal("0.00")
    if not isinstance(valor, Decimal):
        valor = Decimal(str(valor))
    return valor.quantize(CENTAVOS, rounding=ROUND_HALF_UP)
