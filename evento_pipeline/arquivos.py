# evento_pipeline/arquivos.py
#
# Thin wrappers around Polars I/O so the rest of the job never calls polars
# directly for files.
from __future__ import annotations

from pathlib import Path

import polars as pl


def read_cadastros(path: Path) -> pl.DataFrame:
    """Read a registrations export. ``.csv`` is read as CSV, anything else as Parquet.

    All CSV columns are read as strings so that documents keep leading zeros.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Arquivo de cadastros nao encontrado: {path}")
    if path.suffix.lower() == ".csv":
        return pl.read_csv(path, infer_schema_length=0)
    return pl.read_parquet(path)


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Write a DataFrame to Parquet, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path
