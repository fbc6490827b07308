"""Runtime configuration.

Only two knobs exist:
- where puzzle inputs live (``AOC2020_INPUT_DIR``, default ``<repo>/inputs``)
- the default log level (``AOC2020_LOG_LEVEL``, default ``WARNING``)

Command-line flags override both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_INPUT_DIR = REPO_ROOT / "inputs"


@dataclass(frozen=True)
class AocConfig:
    input_dir: Path
    log_level: int


def _parse_level(raw: str) -> int:
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {raw!r}")
    return level


def load_config(environ: Optional[Mapping[str, str]] = None) -> AocConfig:
    env = os.environ if environ is None else environ
    input_dir = env.get("AOC2020_INPUT_DIR", "")
    level = env.get("AOC2020_LOG_LEVEL", "")
    return AocConfig(
        input_dir=Path(input_dir).expanduser() if input_dir else DEFAULT_INPUT_DIR,
        log_level=_parse_level(level) if level else logging.WARNING,
    )
