# evento_api/domain/documento/value_objects.py
from __future__ import annotations

from dataclasses import dataclass

from .digitos import apenas_digitos, validar
from .enums import TipoDocumento
from .mascara import formatar


@dataclass(frozen=True)
class DocumentoFiscal:
    """Value Object imutavel para CPF ou CNPJ.

    Diferente de uma validacao no construtor, aqui so o comprimento e exigido:
    o documento e construido a partir do que o usuario digitou e `valido` e
    recalculado a cada acesso. CPF NUNCA aparece completo em repr/str (LGPD).
    """

    tipo: TipoDocumento
    _digitos: str  # sempre 11 (CPF) ou 14 (CNPJ) digitos

    def __init__(self, tipo: TipoDocumento, raw: str) -> None:
        digitos = apenas_digitos(raw)
        if len(digitos) != tipo.comprimento:
            raise ValueError(
                f"{tipo.rotulo} invalido: comprimento {len(digitos)}, "
                f"esperado {tipo.comprimento}"
            )
        object.__setattr__(self, "tipo", tipo)
        object.__setattr__(self, "_digitos", digitos)

    @classmethod
    def tentar(cls, tipo: TipoDocumento, raw: str) -> DocumentoFiscal | None:
        """Como o construtor, mas devolve None para texto incompleto."""
        try:
            return cls(tipo, raw)
        except ValueError:
            return None

    @property
    def digitos(self) -> str:
        """Digitos sem formatacao. Para CPF, usar com cuidado: nunca logar."""
        return self._digitos

    @property
    def valido(self) -> bool:
        return validar(self.tipo, self._digitos)

    @property
    def formatado(self) -> str:
        return formatar(self.tipo, self._digitos)

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-** para CPF; CNPJ e dado publico e sai formatado."""
        if self.tipo is TipoDocumento.CPF:
            d = self._digitos
            return f"***.{d[3:6]}.{d[6:9]}-**"
        return self.formatado

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentoFiscal):
            return NotImplemented
        return self.tipo is other.tipo and self._digitos == other._digitos

    def __hash__(self) -> int:
        return hash((self.tipo, self._digitos))

    def __repr__(self) -> str:
        return f"DocumentoFiscal({self.tipo.rotulo}, {self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado
