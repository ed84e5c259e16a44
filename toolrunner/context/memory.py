from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

from .base import ContextRecord, ContextStore


class InMemoryContextStore(ContextStore):
    """Context store keeping records in process memory."""

    def __init__(self) -> None:
        self._records: List[ContextRecord] = []
        self._lock = threading.Lock()

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
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> List[ContextRecord]:
        with self._lock:
            return list(self._records)

    def records_for(self, correlation_id: str) -> List[ContextRecord]:
        return [r for r in self.records if r.correlation_id == correlation_id]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
