"""Load/save the published leaderboard snapshot (JSON file)."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from core import filesystem
from domain.models import Snapshot

logger = logging.getLogger(__name__)


def dumps(snapshot: Snapshot) -> str:
    return json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False) + "\n"


def write_snapshot(snapshot: Snapshot, path: str) -> None:
    """Replace the snapshot at ``path``; raises ``filesystem.WriteError``."""
    filesystem.write_text(path, dumps(snapshot))
    logger.info("Wrote %s with %d players", path, len(snapshot.rows))


def load_snapshot(path: str) -> Optional[Dict[str, Any]]:
    if not os.path.exists(path):
        return None
    return json.loads(filesystem.read_text(path))
