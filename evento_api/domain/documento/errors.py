# evento_api/domain/documento/errors.py
from __future__ import annotations

from .enums import TipoDocumento
from .mascara import mensagem_invalido


class DocumentoInvalidoError(ValueError):
    """Documento ausente ou reprovado na verificacao. `mensagem` vai para o usuario."""

    def __init__(self, tipo: TipoDocumento, mensagem: str | None = None) -> None:
        self.tipo = tipo
        self.mensagem = mensagem or mensagem_invalido(tipo)
        super().__init__(self.mensagem)
