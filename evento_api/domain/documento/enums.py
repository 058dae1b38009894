# evento_api/domain/documento/enums.py
from __future__ import annotations

from enum import Enum


class TipoDocumento(str, Enum):
    CPF = "cpf"    # pessoa fisica, 11 digitos
    CNPJ = "cnpj"  # pessoa juridica, 14 digitos

    @property
    def comprimento(self) -> int:
        return 11 if self is TipoDocumento.CPF else 14

    @property
    def rotulo(self) -> str:
        return self.value.upper()


class TipoPessoa(str, Enum):
    FISICA = "fisica"
    JURIDICA = "juridica"

    @property
    def tipo_documento(self) -> TipoDocumento:
        """Documento exigido no cadastro para este tipo de pessoa."""
        if self is TipoPessoa.JURIDICA:
            return TipoDocumento.CNPJ
        return TipoDocumento.CPF
