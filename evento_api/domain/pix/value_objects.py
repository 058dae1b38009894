# evento_api/domain/pix/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from evento_api.domain.documento.digitos import apenas_digitos, detectar_tipo, validar
from evento_api.domain.documento.enums import TipoDocumento

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_TELEFONE = re.compile(r"^\+55\d{10,11}$")
_ALEATORIA = re.compile(
    r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$", re.IGNORECASE
)
# CPF/CNPJ como chave: apenas digitos e a pontuacao usual
_DOCUMENTO = re.compile(r"^[\d.\-/ ]+$")


class TipoChavePix(str, Enum):
    EMAIL = "email"
    TELEFONE = "telefone"
    ALEATORIA = "aleatoria"
    CPF = "cpf"
    CNPJ = "cnpj"


@dataclass(frozen=True)
class ChavePix:
    """Chave PIX classificada e normalizada. Levanta ValueError se nao reconhecida."""

    tipo: TipoChavePix
    valor: str

    def __init__(self, raw: str) -> None:
        tipo, valor = _classificar(raw.strip())
        object.__setattr__(self, "tipo", tipo)
        object.__setattr__(self, "valor", valor)


def _classificar(chave: str) -> tuple[TipoChavePix, str]:
    if _EMAIL.match(chave):
        return TipoChavePix.EMAIL, chave.lower()
    if _TELEFONE.match(chave):
        return TipoChavePix.TELEFONE, chave
    if _ALEATORIA.match(chave):
        return TipoChavePix.ALEATORIA, chave.lower()
    if _DOCUMENTO.match(chave):
        tipo = detectar_tipo(chave)
        if tipo is not None and validar(tipo, chave):
            digitos = apenas_digitos(chave)
            if tipo is TipoDocumento.CPF:
                return TipoChavePix.CPF, digitos
            return TipoChavePix.CNPJ, digitos
    raise ValueError("Chave PIX invalida")
