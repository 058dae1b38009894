# evento_api/application/dtos/documento_dto.py
from pydantic import BaseModel, Field

from evento_api.domain.documento.enums import TipoPessoa


class FormatacaoDTO(BaseModel):
    tipo: str
    formatado: str
    placeholder: str


class VerificacaoDocumentoDTO(BaseModel):
    tipo: str
    digitos: str
    formatado: str
    completo: bool
    valido: bool
    mensagem: str | None


class CadastroDocumentoRequest(BaseModel):
    person_type: TipoPessoa = TipoPessoa.FISICA
    cpf: str | None = Field(default=None, max_length=64)
    cnpj: str | None = Field(default=None, max_length=64)


class DocumentoCadastroDTO(BaseModel):
    person_type: str
    tipo: str
    documento: str
    formatado: str


class ChavePixDTO(BaseModel):
    tipo: str
    valor: str
