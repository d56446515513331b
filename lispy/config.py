from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


_DEFAULT_PROMPT = "lispy> "
_DEFAULT_LOG_LEVEL = "WARNING"


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_path() -> List[Path]:
    """Directories searched by `load` after the current directory."""
    return paths_from_env("LISPY_PATH")


def resolve_source(name: str) -> Path:
    """Resolve a `load` argument against the cwd, then each LISPY_PATH root.

    Falls back to the name as given so the caller reports the failure.
    """
    candidate = Path(name)
    if candidate.is_absolute() or candidate.exists():
        return candidate
    for root in get_load_path():
        p = root / candidate
        if p.exists():
            return p
    return candidate


def get_log_level() -> str:
    return os.environ.get("LISPY_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT", _DEFAULT_PROMPT)
