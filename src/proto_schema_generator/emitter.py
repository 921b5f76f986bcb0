"""Indentation-aware text buffer for the schema document."""

from __future__ import annotations

from typing import override

LINE_END = ";"
NEWLINE = "\n"


class Emitter:
    """Accumulates the lines of the schema document.

    The emitter is append-only and tracks the current indentation depth. Blocks are opened
    and closed in pairs, statements are written at the depth of the innermost open block.
    """

    def __init__(self, indent: str = "\t"):
        """Initialize an empty document.

        Args:
            indent (str, optional): One level of indentation. Defaults to a tab.
        """
        self._indent = indent
        self._parts: list[str] = []
        self.depth = 0

    @property
    def indentation(self) -> str:
        """The indentation prefix at the current depth."""
        return self._indent * self.depth

    def open_block(self, keyword: str, name: str):
        """Open a block like `message Person{` and indent the following lines."""
        self._parts.append(f"{self.indentation}{keyword} {name}{{{NEWLINE}")
        self.depth += 1

    def close_block(self):
        """Close the innermost block."""
        if self.depth == 0:
            raise RuntimeError("There is no open block to close.")

        self.depth -= 1
        self._parts.append(f"{self.indentation}}}{NEWLINE}")

    def statement(self, *tokens: str):
        """Write one statement, e.g. `string name = 1;`, at the current depth."""
        self._parts.append(f"{self.indentation}{' '.join(tokens)}{LINE_END}{NEWLINE}")

    def raw(self, line: str = ""):
        """Write a line as is, without indentation."""
        self._parts.append(f"{line}{NEWLINE}")

    def getvalue(self) -> str:
        """The document text written so far."""
        return "".join(self._parts)

    @override
    def __repr__(self) -> str:
        """Return a readable representation for debugging."""
        return f"Emitter(depth={self.depth}, parts={len(self._parts)})"
