"""Key-value JSON store for user settings.

Each key maps to ``<base_dir>/<key>.json``, wrapped in a metadata envelope::

    {"meta": {"key": "...", "saved_at": "..."}, "data": {...}}

The store knows nothing about the payload; ``profile`` turns it into
``UserSettings`` and substitutes defaults when a key is missing.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003 - used at runtime
from typing import Any


class SettingsStore:
    """Manages read/write of enveloped JSON documents keyed by name."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir

    def path_for(self, key: str) -> Path:
        """Return the file path backing ``key``."""
        return self._resolve(key)

    def read(self, key: str) -> dict[str, Any] | None:
        """Read the ``data`` payload stored under ``key``, or None if absent."""
        envelope = self.read_raw(key)
        if envelope is None:
            return None
        data: dict[str, Any] = envelope.get("data", envelope)
        return data

    def read_raw(self, key: str) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) stored under ``key``."""
        full = self._resolve(key)
        if not full.exists():
            return None
        with full.open(encoding="utf-8") as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(self, key: str, data: Any, **params: Any) -> Path:
        """Write data under ``key`` wrapped in a metadata envelope.

        Args:
            key: Document name (e.g. ``"life-counter-settings"``).
            data: Payload to store under the ``data`` key.
            **params: Extra metadata fields (e.g. ``app_version``).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(key)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "key": key,
            "saved_at": datetime.now(UTC).isoformat(),
        }
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w", encoding="utf-8") as f:
            json.dump(envelope, f, indent=2, ensure_ascii=False)

        return full

    def _resolve(self, key: str) -> Path:
        full = self.base / f"{key}.json"
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Key escapes store base directory: {key}"
            raise ValueError(msg) from None
        return full
