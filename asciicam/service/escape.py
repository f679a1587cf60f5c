from __future__ import annotations

# Characters that are unsafe (or collapse) in raw markup
HTML_ESCAPES = {" ": "&nbsp", "&": "&amp", "<": "&lt", ">": "&gt"}


def escape_char(char: str) -> str:
    return HTML_ESCAPES.get(char, char)


def escape_ramp(ramp: str) -> list[str]:
    """Escapes every character of a ramp, keeping indices aligned with the ramp."""
    return [escape_char(c) for c in ramp]
