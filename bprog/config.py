"""Environment-driven settings.

BPROG_PRELUDE_PATH  prelude files or directories of *.bprog files, separated
                    like PATH; defaults to the `prelude` directory shipped
                    next to this module.
BPROG_READ_PROMPT   text `read` writes before waiting for a line.
BPROG_LOG_LEVEL     logging level name for the command-line runner.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_PRELUDE_DIR = PACKAGE_DIR / 'prelude'
DEFAULT_LOG_LEVEL = 'WARNING'


def get_prelude_paths() -> List[Path]:
    raw = os.environ.get('BPROG_PRELUDE_PATH', '')
    entries = [entry.strip() for entry in raw.split(os.pathsep)]
    paths = [Path(entry) for entry in entries if entry]
    return paths or [DEFAULT_PRELUDE_DIR]


def get_prelude_files() -> List[Path]:
    """Prelude sources in load order; missing entries are skipped."""
    files: List[Path] = []
    for path in get_prelude_paths():
        if path.is_dir():
            files.extend(sorted(path.glob('*.bprog')))
        elif path.is_file():
            files.append(path)
    return files


def get_read_prompt() -> str:
    return os.environ.get('BPROG_READ_PROMPT', '')


def get_log_level() -> str:
    return os.environ.get('BPROG_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
