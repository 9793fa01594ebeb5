from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from symbex.config import get_prelude_root

logger = logging.getLogger("symbex.prelude")


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def load_file(itp: _HasEvalPrelude, path: Path) -> None:
    logger.debug("loading %s", path)
    itp.eval_prelude(path.read_text(encoding='utf-8'))


# Prelude convenience loader (std/core.sx under the prelude root)

def load_prelude(itp: _HasEvalPrelude) -> None:
    root = get_prelude_root()
    std_core = root / 'std' / 'core.sx'
    if not std_core.exists():
        raise FileNotFoundError(f"Cannot find prelude '{std_core}' (SYMBEX_PRELUDE_PATH)")
    load_file(itp, std_core)
