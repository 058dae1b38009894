# evento_pipeline/main.py
#
# Entry point of the batch validation job: read the export, validate every
# document, write the Parquet report.
from __future__ import annotations

from pathlib import Path

import polars as pl

from evento_pipeline.config import PipelineConfig, load_config
from evento_pipeline.arquivos import read_cadastros, write_parquet
from evento_pipeline.log import log
from evento_pipeline.validate_cadastros import resumo, validar_cadastros


def run(config: PipelineConfig) -> Path:
    """Validate the registrations in config.input_path and write the report.

    Returns:
        Path of the written Parquet report.

    Raises:
        FileNotFoundError: if the input file does not exist.
        ValueError: if the input lacks a required column.
    """
    log(f"Reading {config.input_path}...")
    df = read_cadastros(config.input_path)
    log(f"  {len(df):,} cadastros lidos")

    validado = validar_cadastros(df)
    for tipo, contagem in resumo(validado).items():
        log(f"  {tipo.upper()}: {contagem['validos']:,} validos, {contagem['invalidos']:,} invalidos")

    nao_reconhecidos = validado.filter(~pl.col("person_type_reconhecido")).height
    if nao_reconhecidos:
        log(f"  WARNING: {nao_reconhecidos:,} cadastros com person_type desconhecido marcados como invalidos")

    path = write_parquet(validado, config.report_path)
    log(f"Report written to {path}")
    return path


def main() -> None:
    run(load_config())


if __name__ == "__main__":
    main()
