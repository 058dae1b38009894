# evento_api/domain/documento/mascara.py
#
# Mascaras de exibicao aplicadas a cada tecla digitada.
#
# Invariantes:
#   - formatar() nunca levanta excecao e devolve apenas digitos e a pontuacao
#     fixa do tipo.
#   - Um separador so aparece quando ja existe um digito depois dele:
#     "123" -> "123", "1234" -> "123.4".
#   - formatar(t, formatar(t, x)) == formatar(t, x).
from __future__ import annotations

from .digitos import apenas_digitos
from .enums import TipoDocumento

# (posicao do digito apos a qual o separador entra, separador)
_SEPARADORES: dict[TipoDocumento, tuple[tuple[int, str], ...]] = {
    TipoDocumento.CPF: ((3, "."), (6, "."), (9, "-")),
    TipoDocumento.CNPJ: ((2, "."), (5, "."), (8, "/"), (12, "-")),
}

_PLACEHOLDERS = {
    TipoDocumento.CPF: "000.000.000-00",
    TipoDocumento.CNPJ: "00.000.000/0000-00",
}


def _aplicar(digitos: str, separadores: tuple[tuple[int, str], ...]) -> str:
    partes: list[str] = []
    inicio = 0
    for posicao, sep in separadores:
        if len(digitos) <= posicao:
            break
        partes.append(digitos[inicio:posicao] + sep)
        inicio = posicao
    partes.append(digitos[inicio:])
    return "".join(partes)


def formatar(tipo: TipoDocumento, texto: str) -> str:
    """Formata progressivamente: XXX.XXX.XXX-XX (CPF) ou XX.XXX.XXX/XXXX-XX (CNPJ).

    Digitos excedentes ao comprimento do documento sao descartados.
    """
    digitos = apenas_digitos(texto)[: tipo.comprimento]
    return _aplicar(digitos, _SEPARADORES[tipo])


def placeholder(tipo: TipoDocumento) -> str:
    return _PLACEHOLDERS[tipo]


def mensagem_invalido(tipo: TipoDocumento) -> str:
    return f"{tipo.rotulo} inválido"


def formatar_cep(texto: str) -> str:
    """XXXXX-XXX, com o hifen so a partir do sexto digito."""
    return _aplicar(apenas_digitos(texto)[:8], ((5, "-"),))
