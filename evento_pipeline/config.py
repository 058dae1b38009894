# evento_pipeline/config.py
#
# Configuration for the batch document validation job, loaded from environment
# variables.
#
# Invariants:
#   - input_path is always set (load_config refuses to build a config without
#     CADASTROS_INPUT_PATH).
#   - report_path defaults to <data_dir>/output/cadastros_validados.parquet.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline configuration."""

    input_path: Path
    data_dir: Path
    report_path: Path

    @property
    def output_dir(self) -> Path:
        return self.report_path.parent


def load_config() -> PipelineConfig:
    """Build PipelineConfig from environment variables.

    Raises:
        ValueError: if CADASTROS_INPUT_PATH is not set.
    """
    input_raw = os.environ.get("CADASTROS_INPUT_PATH")
    if not input_raw:
        raise ValueError(
            "CADASTROS_INPUT_PATH environment variable is required. "
            "Point it to the CSV or Parquet export of registrations."
        )

    data_dir = Path(os.environ.get("PIPELINE_DATA_DIR", str(_PIPELINE_DIR / "data")))
    report_path = Path(
        os.environ.get(
            "CADASTROS_REPORT_PATH",
            str(data_dir / "output" / "cadastros_validados.parquet"),
        )
    )
    return PipelineConfig(
        input_path=Path(input_raw),
        data_dir=data_dir,
        report_path=report_path,
    )
