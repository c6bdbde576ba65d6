"""Read-only view over a ``.env`` file."""

from __future__ import annotations

from pathlib import Path

from dotenv import dotenv_values


class EnvFile:
    """Lazily parsed ``.env`` file; a missing file reads as empty."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._values: dict[str, str] | None = None

    def read(self, key: str) -> str:
        if self._values is None:
            self._values = self._load()
        return self._values.get(key, "")

    def invalidate(self) -> None:
        self._values = None

    def _load(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        return {k: v for k, v in dotenv_values(self.path).items() if v is not None}
