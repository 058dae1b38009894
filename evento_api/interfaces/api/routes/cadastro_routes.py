# evento_api/interfaces/api/routes/cadastro_routes.py
from fastapi import APIRouter, Depends, HTTPException

from evento_api.application.dtos.documento_dto import CadastroDocumentoRequest, DocumentoCadastroDTO
from evento_api.application.services.documento_service import CadastroService
from evento_api.domain.documento.errors import DocumentoInvalidoError
from evento_api.interfaces.api.dependencies import get_cadastro_service

router = APIRouter(tags=["cadastro"])


@router.post("/cadastro/documento", response_model=DocumentoCadastroDTO)
def validar_documento_cadastro(
    requisicao: CadastroDocumentoRequest,
    service: CadastroService = Depends(get_cadastro_service),  # noqa: B008
) -> DocumentoCadastroDTO:
    try:
        return service.validar_documento(requisicao)
    except DocumentoInvalidoError as err:
        raise HTTPException(status_code=422, detail=err.mensagem) from err
