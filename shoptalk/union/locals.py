"""Directory of UPS Teamster Local unions.

The directory is a representative snapshot; Locals that merged or were
renumbered since it was compiled resolve as unknown and fall back to
master-only scope.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from shoptalk.models.union import Local, Region

logger = logging.getLogger(__name__)

LOCALS_PATH = Path(__file__).with_name("data") / "locals.json"


def load_locals(path: Path = LOCALS_PATH) -> List[Local]:
    with path.open("r", encoding="utf-8") as handle:
        rows = json.load(handle)
    return [Local(**row) for row in rows]


LOCALS: List[Local] = load_locals()

_BY_NUMBER: Dict[int, Local] = {}
for _local in LOCALS:
    # A number can appear twice (one Local, two halls); the first entry wins.
    _BY_NUMBER.setdefault(_local.number, _local)


def get_local_by_number(number: int) -> Optional[Local]:
    return _BY_NUMBER.get(number)


def get_locals_by_region(region: Region) -> List[Local]:
    return [local for local in LOCALS if local.region == region]


def all_states() -> List[str]:
    return sorted({local.state for local in LOCALS})


def format_local_display(local: Local) -> str:
    return f"Local {local.number} - {local.city}, {local.state}"
