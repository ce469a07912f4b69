"""
Message templating for argument-check failures.

Positional "{}" placeholders are filled left to right from the arguments.
Too few arguments leave the remaining placeholders verbatim; too many are
appended after the message as " - [a, b]".
"""

from __future__ import annotations

from typing import Any, Optional

PLACEHOLDER = "{}"


def _render(arg: Any) -> str:
    return "null" if arg is None else str(arg)


def format_message(template: Optional[str], *args: Any) -> str:
    """
    Substitute positional "{}" placeholders in template with args.

    A None template is treated as the empty string.
    """
    text = "" if template is None else str(template)
    if not args:
        return text

    parts: list[str] = []
    pos = 0
    used = 0
    while used < len(args):
        found = text.find(PLACEHOLDER, pos)
        if found < 0:
            break
        parts.append(text[pos:found])
        parts.append(_render(args[used]))
        pos = found + len(PLACEHOLDER)
        used += 1
    parts.append(text[pos:])

    if used < len(args):
        excess = ", ".join(_render(a) for a in args[used:])
        parts.append(f" - [{excess}]")
    return "".join(parts)
