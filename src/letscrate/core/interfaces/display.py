"""Display sink contract.

The engine writes through two primitives only. Width is exposed so the
layout helpers can fit a line to the terminal; None means unknown width.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DisplaySink(Protocol):
    @property
    def width(self) -> int | None:
        ...

    def line(self, text: str, *, style: str | None = None) -> None:
        ...

    def error_line(self, text: str) -> None:
        ...
