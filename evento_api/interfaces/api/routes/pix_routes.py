# evento_api/interfaces/api/routes/pix_routes.py
from fastapi import APIRouter, Depends, HTTPException

from evento_api.application.dtos.documento_dto import ChavePixDTO
from evento_api.application.services.pix_service import PixService
from evento_api.interfaces.api.dependencies import get_pix_service

router = APIRouter(tags=["pix"])


@router.get("/pix/chaves/{chave:path}", response_model=ChavePixDTO)
def classificar_chave_pix(
    chave: str,
    service: PixService = Depends(get_pix_service),  # noqa: B008
) -> ChavePixDTO:
    if len(chave) > 100:
        raise HTTPException(status_code=422, detail="Chave PIX invalida")
    try:
        return service.classificar_chave(chave)
    except ValueError as err:
        raise HTTPException(status_code=422, detail="Chave PIX invalida") from err
