import re
from typing import Optional


def normalizar_telefone(telefone: Optional[str]) -> Optional[str]:
    """
    Normaliza o número de telefone removendo caracteres não numéricos.

    - Remove máscara: espaços, parênteses, hífen, '+' etc.
    - Retorna None quando não sobra nenhum dígito.

    Não adiciona prefixo de país nem o "9" de celular: o número é salvo
    exatamente com os dígitos recebidos.
    """
    if telefone is None:
        return None
    telefone_limpo = re.sub(r"[^\d]", "", telefone)
    return telefone_limpo or None
