"""Key/value option persistence.

Options are stored as whole JSON-compatible blobs under a single name each.
Reads return a deep copy so callers can never mutate stored state in place.
"""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)


class OptionStore(Protocol):
    def get(self, name: str, default: Any = None) -> Any: ...

    def set(self, name: str, value: Any) -> None: ...


class InMemoryOptionStore:
    """Process-local store; contents are lost on restart."""

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._options: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, name: str, default: Any = None) -> Any:
        if name not in self._options:
            return default
        return copy.deepcopy(self._options[name])

    def set(self, name: str, value: Any) -> None:
        self._options[name] = copy.deepcopy(value)


class JsonFileOptionStore:
    """Store every option in one JSON object on disk.

    Writes go to a temporary file in the same directory which then replaces
    the target, so concurrent readers see either the old or the new document.
    I/O and decode errors propagate to the caller.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        if not isinstance(data, dict):
            logger.warning("Option file %s does not hold a JSON object; ignoring it", self.path)
            return {}
        return data

    def get(self, name: str, default: Any = None) -> Any:
        return self._load().get(name, default)

    def set(self, name: str, value: Any) -> None:
        data = self._load()
        data[name] = value
        self._atomic_write(data)

    def _atomic_write(self, payload: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f"{self.path.name}.")
        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, ensure_ascii=False, indent=2, sort_keys=True)
            Path(tmp_name).replace(self.path)
        finally:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
