"""ABI descriptor loading and lookup."""

import json
from pathlib import Path
from typing import Any

from collective.config import settings
from collective.errors import ConfigurationError


class ABILoader:
    """Loads ABI descriptors from a directory and answers lookups on them."""

    def __init__(self):
        self._abi_cache: dict[Path, list[dict[str, Any]]] = {}

    def resolve(self, abi_name: str, abi_path: str | Path | None = None) -> Path:
        """Get the descriptor file for a contract name.

        ``abi_name`` may be given with or without the ``.json`` suffix.
        """
        file_name = abi_name if abi_name.endswith(".json") else f"{abi_name}.json"
        return Path(abi_path or settings.abi_path) / file_name

    def load(self, abi_name: str, abi_path: str | Path | None = None) -> list[dict[str, Any]]:
        """Load an ABI, either a bare list or a compiler artifact with an ``abi`` key."""
        abi_file = self.resolve(abi_name, abi_path).resolve()

        cached = self._abi_cache.get(abi_file)
        if cached is not None:
            return cached

        if not abi_file.is_file():
            raise ConfigurationError(f"ABI not found: {abi_file}")

        try:
            with abi_file.open("r", encoding="utf-8") as f:
                artifact = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Unable to read ABI {abi_file}: {e}") from e

        abi = artifact.get("abi") if isinstance(artifact, dict) else artifact
        if not isinstance(abi, list):
            raise ConfigurationError(f"No ABI entries in {abi_file}")

        self._abi_cache[abi_file] = abi
        return abi

    def clear(self) -> None:
        self._abi_cache.clear()

    def get_functions(self, abi: list[dict[str, Any]], name: str) -> list[dict[str, Any]]:
        """Get all overloads of a function."""
        return [
            item
            for item in abi
            if item.get("type") == "function" and item.get("name") == name
        ]

    def get_event(self, abi: list[dict[str, Any]], name: str) -> dict[str, Any] | None:
        """Get an event entry by name."""
        for item in abi:
            if item.get("type") == "event" and item.get("name") == name:
                return item
        return None

    def get_event_names(self, abi: list[dict[str, Any]]) -> list[str]:
        """Event names in declaration order, without duplicates."""
        names: list[str] = []
        for item in abi:
            if item.get("type") == "event" and item["name"] not in names:
                names.append(item["name"])
        return names

    def get_function_signature(self, func: dict[str, Any]) -> str:
        """Get function signature from ABI entry."""
        name = func["name"]
        inputs = func.get("inputs", [])
        types = ",".join(inp["type"] for inp in inputs)
        return f"{name}({types})"


# Global instance
abi_loader = ABILoader()


def load_abi(abi_name: str, abi_path: str | Path | None = None) -> list[dict[str, Any]]:
    """Load an ABI through the shared loader."""
    return abi_loader.load(abi_name, abi_path)
