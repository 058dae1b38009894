# evento_api/application/services/pix_service.py
from __future__ import annotations

from evento_api.domain.pix.value_objects import ChavePix

from ..dtos.documento_dto import ChavePixDTO


class PixService:
    def classificar_chave(self, raw: str) -> ChavePixDTO:
        """Levanta ValueError para chave nao reconhecida."""
        chave = ChavePix(raw)
        return ChavePixDTO(tipo=chave.tipo.value, valor=chave.valor)
