# evento_pipeline/validate_cadastros.py
#
# Backend validation pass over exported registrations.
#
# Each row carries person_type ("fisica" | "juridica", null means "fisica";
# anything else is flagged in person_type_reconhecido)
# and the two document columns cpf / cnpj. The document required by the
# person type is picked, normalised and checked with the same domain functions
# the API uses.
#
# Invariants:
#   - validar_cadastros never drops or reorders rows and never mutates its input.
#   - documento is digits only (possibly empty); documento_valido is never null.
#   - Raw documents are dropped from the output; only the normalised column stays.
from __future__ import annotations

import polars as pl

from evento_api.domain.documento.digitos import apenas_digitos, validar
from evento_api.domain.documento.enums import TipoDocumento, TipoPessoa
from evento_api.domain.documento.mascara import formatar

COLUNAS_OBRIGATORIAS = ("person_type", "cpf", "cnpj")


def _exigir_colunas(df: pl.DataFrame) -> None:
    for coluna in COLUNAS_OBRIGATORIAS:
        if coluna not in df.columns:
            raise ValueError(f"Coluna obrigatoria ausente: {coluna}")


def _documento_como_texto(df: pl.DataFrame, coluna: str, tipo: TipoDocumento) -> pl.Expr:
    """Colunas inteiras perdem zeros a esquerda; recompor ate o comprimento do tipo."""
    expr = pl.col(coluna).cast(pl.Utf8)
    if df.schema[coluna].is_integer():
        expr = expr.str.zfill(tipo.comprimento)
    return expr


def validar_cadastros(df: pl.DataFrame) -> pl.DataFrame:
    """Add tipo_documento, documento, documento_formatado, documento_valido and
    person_type_reconhecido.

    Rows whose person_type is neither "fisica" nor "juridica" (null counts as
    "fisica") are checked as CPF but flagged with person_type_reconhecido =
    False and documento_valido = False, matching the API's rejection.

    Args:
        df: registrations with at least person_type, cpf and cnpj columns.

    Returns:
        New DataFrame without the raw cpf/cnpj columns.

    Raises:
        ValueError: if a required column is missing.
    """
    _exigir_colunas(df)

    person_type = (
        pl.col("person_type")
        .cast(pl.Utf8)
        .fill_null(TipoPessoa.FISICA.value)
        .str.strip_chars()
        .str.to_lowercase()
    )
    juridica = person_type == TipoPessoa.JURIDICA.value
    df = df.with_columns(
        person_type.is_in([p.value for p in TipoPessoa]).alias("person_type_reconhecido"),
        pl.when(juridica)
        .then(pl.lit(TipoDocumento.CNPJ.value))
        .otherwise(pl.lit(TipoDocumento.CPF.value))
        .alias("tipo_documento"),
        pl.when(juridica)
        .then(_documento_como_texto(df, "cnpj", TipoDocumento.CNPJ))
        .otherwise(_documento_como_texto(df, "cpf", TipoDocumento.CPF))
        .fill_null("")
        .map_elements(apenas_digitos, return_dtype=pl.Utf8)
        .alias("documento"),
    )

    pares = pl.struct(["tipo_documento", "documento"])
    df = df.with_columns(
        pares.map_elements(
            lambda r: formatar(TipoDocumento(r["tipo_documento"]), r["documento"]),
            return_dtype=pl.Utf8,
        ).alias("documento_formatado"),
        (
            pares.map_elements(
                lambda r: validar(TipoDocumento(r["tipo_documento"]), r["documento"]),
                return_dtype=pl.Boolean,
            )
            & pl.col("person_type_reconhecido")
        ).alias("documento_valido"),
    )
    return df.drop(["cpf", "cnpj"])


def resumo(df: pl.DataFrame) -> dict[str, dict[str, int]]:
    """Count valid / invalid documents per tipo_documento.

    Args:
        df: DataFrame returned by validar_cadastros().

    Returns:
        {"cpf": {"validos": n, "invalidos": m}, "cnpj": {...}} with both kinds
        always present.
    """
    contagem = {tipo.value: {"validos": 0, "invalidos": 0} for tipo in TipoDocumento}
    agrupado = df.group_by(["tipo_documento", "documento_valido"]).len()
    for tipo, valido, n in agrupado.iter_rows():
        contagem[tipo]["validos" if valido else "invalidos"] += n
    return contagem
