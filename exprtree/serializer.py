"""Append results to a text file, one line per error or tree."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from exprtree.result import Result
from exprtree.tree import Tree

DEFAULT_OUTPUT = "zapis.txt"


class Serializer:
    """Write results to one file: the first save replaces it, later saves append."""

    def __init__(self, path: str | Path = DEFAULT_OUTPUT) -> None:
        self.path = Path(path)
        self._opened = False

    def save(self, result: Result[Any]) -> None:
        """Write the tree of a successful tree result, then every error, one per line."""
        lines: list[str] = []
        value = result.value()
        if result.is_success() and isinstance(value, Tree):
            lines.append(value.prefix())
        lines.extend(error.message for error in result.errors())

        mode = "a" if self._opened else "w"
        self._opened = True
        with self.path.open(mode, encoding="utf-8") as stream:
            stream.writelines(f"{line}\n" for line in lines)