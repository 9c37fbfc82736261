from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

_env_path = Path(__file__).resolve().parents[1] / ".env"
if _env_path.is_file():
    load_dotenv(_env_path, override=False)

DEFAULT_NEAR90_TOLERANCE = 0.01
DEFAULT_UNKNOWN_LABEL = "Unknown File"


@dataclass(frozen=True)
class MolmetaSettings:
    """Configuration loaded from MOLMETA_* environment variables.

      MOLMETA_NEAR90_TOLERANCE=0.01
      MOLMETA_UNKNOWN_LABEL="Unknown File"
      MOLMETA_REPORT_FORMAT=parquet
      MOLMETA_LOG_LEVEL=INFO
    """

    # Degrees; an angle closer than this to 90 counts as a right angle
    near90_tolerance: float = DEFAULT_NEAR90_TOLERANCE

    # Label shown when a model has neither label nor entryId
    unknown_label: str = DEFAULT_UNKNOWN_LABEL

    # Batch report output
    report_format: Literal["parquet", "csv"] = "parquet"

    log_level: str = "INFO"


def _parse_tolerance(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"MOLMETA_NEAR90_TOLERANCE must be a number, got {raw!r}") from None
    if not value > 0:
        raise ValueError(f"MOLMETA_NEAR90_TOLERANCE must be positive, got {value}")
    return value


def load_settings() -> MolmetaSettings:
    """Load settings from environment variables."""
    report_format = os.environ.get("MOLMETA_REPORT_FORMAT", "parquet").lower()
    if report_format not in ("parquet", "csv"):
        raise ValueError(f"MOLMETA_REPORT_FORMAT must be 'parquet' or 'csv', got {report_format!r}")

    return MolmetaSettings(
        near90_tolerance=_parse_tolerance(
            os.environ.get("MOLMETA_NEAR90_TOLERANCE", str(DEFAULT_NEAR90_TOLERANCE))
        ),
        unknown_label=os.environ.get("MOLMETA_UNKNOWN_LABEL", DEFAULT_UNKNOWN_LABEL),
        report_format=report_format,
        log_level=os.environ.get("MOLMETA_LOG_LEVEL", "INFO").upper(),
    )
