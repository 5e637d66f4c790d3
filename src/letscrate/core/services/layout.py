"""Width-fitting helpers for result lines.

Lines put the name on the left and the link/identifier on the right edge of
the terminal. With an unknown width, columns are tab separated instead.
"""

from __future__ import annotations

ELLIPSIS = "..."
ERROR_PREFIX = "Error: "

# Columns reserved for "URL: <link>  ID: <id>" on the right.
_DETAIL_COLUMNS = 35
_MIN_GAP = 2
# Narrowest name kept on tight terminals.
_MIN_NAME = 8


def truncate_name(name: str, length: int) -> str:
    """Keep a prefix and a suffix of `name`, eliding the middle, to fit `length`."""

    if len(name) <= length:
        return name
    if length <= len(ELLIPSIS):
        return name[: max(length, 0)]
    keep = length - len(ELLIPSIS)
    head = (keep + 1) // 2
    tail = keep // 2
    return name[:head] + ELLIPSIS + (name[-tail:] if tail else "")


def info_line(
    name: str,
    link: str,
    identifier: str,
    width: int | None,
    *,
    prefix: str = "",
) -> str:
    """`<prefix><name> ... URL: <link>  ID: <id>` fitted to `width`."""

    if width is None:
        return f"{prefix}{name}\t\tURL: {link}\tID: {identifier}"

    detail = f"URL: {link}  ID: {identifier}"
    name = truncate_name(name, max(width - _DETAIL_COLUMNS - len(prefix), _MIN_NAME))
    room = width - len(prefix) - len(name)
    return prefix + name + detail.rjust(max(room, len(detail) + _MIN_GAP))


def error_text(message: str, argument: str, width: int | None) -> str:
    """Error message with the offending argument pushed to the right edge."""

    if width is None:
        return f"{message}\t<{argument}>"
    tag = f"<{argument}>"
    room = width - len(message) - len(ERROR_PREFIX)
    return message + tag.rjust(max(room, len(tag) + 1))
