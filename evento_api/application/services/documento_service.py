# evento_api/application/services/documento_service.py
from __future__ import annotations

import logging

from evento_api.domain.documento.digitos import apenas_digitos, validar
from evento_api.domain.documento.enums import TipoDocumento
from evento_api.domain.documento.errors import DocumentoInvalidoError
from evento_api.domain.documento.mascara import formatar, mensagem_invalido, placeholder
from evento_api.domain.documento.value_objects import DocumentoFiscal

from ..dtos.documento_dto import (
    CadastroDocumentoRequest,
    DocumentoCadastroDTO,
    FormatacaoDTO,
    VerificacaoDocumentoDTO,
)

logger = logging.getLogger(__name__)


class DocumentoService:
    """Funcoes puras do dominio empacotadas nos DTOs que o formulario consome."""

    def formatar(self, tipo: TipoDocumento, texto: str) -> FormatacaoDTO:
        return FormatacaoDTO(
            tipo=tipo.value,
            formatado=formatar(tipo, texto),
            placeholder=placeholder(tipo),
        )

    def verificar(self, tipo: TipoDocumento, texto: str) -> VerificacaoDocumentoDTO:
        digitos = apenas_digitos(texto)[: tipo.comprimento]
        valido = validar(tipo, texto)
        return VerificacaoDocumentoDTO(
            tipo=tipo.value,
            digitos=digitos,
            formatado=formatar(tipo, texto),
            completo=len(apenas_digitos(texto)) == tipo.comprimento,
            valido=valido,
            # sem conteudo nao ha indicador de erro
            mensagem=mensagem_invalido(tipo) if digitos and not valido else None,
        )


class CadastroService:
    """Verificacao do documento no cadastro: pessoa fisica exige CPF, juridica exige CNPJ."""

    def validar_documento(self, requisicao: CadastroDocumentoRequest) -> DocumentoCadastroDTO:
        tipo = requisicao.person_type.tipo_documento
        raw = requisicao.cpf if tipo is TipoDocumento.CPF else requisicao.cnpj

        if not raw or not apenas_digitos(raw):
            logger.info("Cadastro sem %s (person_type=%s)", tipo.rotulo, requisicao.person_type.value)
            raise DocumentoInvalidoError(tipo, f"{tipo.rotulo} é obrigatório")

        documento = DocumentoFiscal.tentar(tipo, raw)
        if documento is None:
            logger.info("Cadastro com %s de comprimento invalido", tipo.rotulo)
            raise DocumentoInvalidoError(
                tipo, f"{tipo.rotulo} deve ter {tipo.comprimento} dígitos"
            )
        if not documento.valido:
            logger.info("Cadastro com %s reprovado: %s", tipo.rotulo, documento.mascarado)
            raise DocumentoInvalidoError(tipo)

        logger.debug("Documento de cadastro aceito: %s", documento.mascarado)
        return DocumentoCadastroDTO(
            person_type=requisicao.person_type.value,
            tipo=tipo.value,
            documento=documento.digitos,
            formatado=documento.formatado,
        )
