"""Append-only Go source buffer."""

from __future__ import annotations

from . import constants


class Code:
    """Accumulates emitted Go text in the order it is written."""

    def __init__(self):
        self._parts: list[str] = []

    def write(self, text: str):
        self._parts.append(text)

    def write_line(self, text: str = ""):
        self._parts.append(text)
        self._parts.append("\n")

    def lines(self) -> list[str]:
        text = str(self)
        if not text:
            return []
        return text.removesuffix("\n").split("\n")

    def numbered(self) -> str:
        """Render the buffer with a right-aligned line number per line."""
        return "\n".join(
            constants.NUMBERED_LINE_TEMPLATE.format(number=i, text=line)
            for i, line in enumerate(self.lines(), start=1)
        )

    def __str__(self) -> str:
        return "".join(self._parts)
