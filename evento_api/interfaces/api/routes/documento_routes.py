# evento_api/interfaces/api/routes/documento_routes.py
from fastapi import APIRouter, Depends, Query

from evento_api.application.dtos.documento_dto import FormatacaoDTO, VerificacaoDocumentoDTO
from evento_api.application.services.documento_service import DocumentoService
from evento_api.domain.documento.enums import TipoDocumento
from evento_api.interfaces.api.dependencies import get_documento_service

router = APIRouter(tags=["documentos"])


@router.get("/documentos/{tipo}/formatar", response_model=FormatacaoDTO)
def formatar_documento(
    tipo: TipoDocumento,
    texto: str = Query(default="", max_length=64),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> FormatacaoDTO:
    return service.formatar(tipo, texto)


@router.get("/documentos/{tipo}/validar", response_model=VerificacaoDocumentoDTO)
def validar_documento(
    tipo: TipoDocumento,
    texto: str = Query(default="", max_length=64),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> VerificacaoDocumentoDTO:
    return service.verificar(tipo, texto)
