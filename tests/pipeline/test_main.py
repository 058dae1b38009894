# tests/pipeline/test_main.py
#
# Smoke tests for the batch job entry point and its configuration.
from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from evento_pipeline.config import PipelineConfig, load_config
from evento_pipeline.main import run


def _config(tmp_path: Path, input_path: Path) -> PipelineConfig:
    return PipelineConfig(
        input_path=input_path,
        data_dir=tmp_path,
        report_path=tmp_path / "output" / "report.parquet",
    )


def test_run_csv_escreve_relatorio(tmp_path: Path) -> None:
    csv = tmp_path / "cadastros.csv"
    csv.write_text(
        "id,person_type,cpf,cnpj\n"
        "1,fisica,01234567890,\n"
        "2,juridica,,11222333000181\n"
        "3,fisica,11144477735,\n",
        encoding="utf-8",
    )

    path = run(_config(tmp_path, csv))

    assert path.exists()
    df = pl.read_parquet(path)
    # Leading zeros survive because CSV columns are read as strings.
    assert df["documento"][0] == "01234567890"
    assert df["documento_valido"].to_list() == [True, True, True]


def test_run_parquet(tmp_path: Path) -> None:
    entrada = tmp_path / "cadastros.parquet"
    pl.DataFrame(
        {"person_type": ["fisica"], "cpf": ["00000000000"], "cnpj": [""]}
    ).write_parquet(entrada)

    df = pl.read_parquet(run(_config(tmp_path, entrada)))
    assert df["documento_valido"].to_list() == [False]


def test_run_arquivo_inexistente(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        run(_config(tmp_path, tmp_path / "nao_existe.csv"))


def test_run_loga_resumo(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    csv = tmp_path / "cadastros.csv"
    csv.write_text("person_type,cpf,cnpj\nfisica,11144477736,\n", encoding="utf-8")
    run(_config(tmp_path, csv))
    out = capsys.readouterr().out
    assert "CPF: 0 validos, 1 invalidos" in out


def test_load_config_exige_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CADASTROS_INPUT_PATH", raising=False)
    with pytest.raises(ValueError, match="CADASTROS_INPUT_PATH"):
        load_config()


def test_load_config_caminhos_padrao(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CADASTROS_INPUT_PATH", str(tmp_path / "in.csv"))
    monkeypatch.setenv("PIPELINE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("CADASTROS_REPORT_PATH", raising=False)
    cfg = load_config()
    assert cfg.input_path == tmp_path / "in.csv"
    assert cfg.report_path == tmp_path / "output" / "cadastros_validados.parquet"
    assert cfg.output_dir == tmp_path / "output"


def test_run_avisa_person_type_desconhecido(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    csv = tmp_path / "cadastros.csv"
    csv.write_text("person_type,cpf,cnpj\noutra,11144477735,\nfisica,11144477735,\n", encoding="utf-8")
    run(_config(tmp_path, csv))
    out = capsys.readouterr().out
    assert "WARNING: 1 cadastros com person_type desconhecido" in out
    assert "CPF: 1 validos, 1 invalidos" in out
