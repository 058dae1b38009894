# evento_api/interfaces/api/dependencies.py
from evento_api.application.services.documento_service import CadastroService, DocumentoService
from evento_api.application.services.pix_service import PixService


def get_documento_service() -> DocumentoService:
    return DocumentoService()


def get_cadastro_service() -> CadastroService:
    return CadastroService()


def get_pix_service() -> PixService:
    return PixService()
