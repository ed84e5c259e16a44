"""JSON-file context store.

Each saved call becomes one file:
``<base_dir>/<correlation_id>/<tool_name>_<args_hash>.json``.
Saves run on worker threads and are serialised by a lock, so repeated
calls with identical arguments cannot interleave their writes.
"""

import hashlib
import json
import os
import re
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .base import ContextRecord, ContextStore
from ..observability.logging import ToolLogger

logger = ToolLogger("context")

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def _safe_component(value: str) -> str:
    return _UNSAFE_CHARS.sub("_", value) or "_"


def args_hash(args: Dict[str, Any]) -> str:
    """Stable short hash of a call's arguments."""
    payload = json.dumps(args, sort_keys=True, default=str)
    return hashlib.md5(payload.encode("utf-8")).hexdigest()[:12]


class FileContextStore(ContextStore):
    """Context store writing one JSON document per tool call."""

    def __init__(self, base_dir: Union[str, os.PathLike]):
        self.base_dir = Path(base_dir)
        self._lock = threading.Lock()

    def path_for(self, tool_name: str, args: Dict[str, Any], correlation_id: str) -> Path:
        filename = f"{_safe_component(tool_name)}_{args_hash(args)}.json"
        return self.base_dir / _safe_component(correlation_id) / filename

    def save(
        self,
        tool_name: str,
        args: Dict[str, Any],
        result: Any,
        error: Optional[BaseException],
        correlation_id: str
    ) -> None:
        record = ContextRecord(
            tool_name=tool_name,
            args=dict(args),
            result=result,
            error=str(error) if error is not None else None,
            correlation_id=correlation_id,
        )
        path = self.path_for(tool_name, args, correlation_id)
        payload = record.model_dump()

        with self._lock:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Readers never see a partially written document
            tmp_path = path.with_suffix(".json.tmp")
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2, default=str)
            os.replace(tmp_path, path)

        logger.debug(
            "Saved tool context",
            tool=tool_name,
            correlation_id=correlation_id,
            path=str(path)
        )

    def load(self, correlation_id: str) -> List[ContextRecord]:
        """Load every record stored under a correlation id."""
        directory = self.base_dir / _safe_component(correlation_id)
        if not directory.is_dir():
            return []
        records = []
        for path in sorted(directory.glob("*.json")):
            with open(path, "r", encoding="utf-8") as fh:
                records.append(ContextRecord.model_validate(json.load(fh)))
        return records
