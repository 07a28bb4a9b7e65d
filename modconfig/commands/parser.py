from __future__ import annotations


def parse_command(text: str) -> tuple[str, str] | None:
    """Split a command line into (name, args).

    The leading slash is optional so console input ("reload") and chat
    input ("/reload") parse the same way.
    """
    text = text.strip()
    if text.startswith("/"):
        text = text[1:]
    parts = text.split(None, 1)
    if not parts:
        return None
    command = parts[0].lower()
    args = parts[1] if len(parts) > 1 else ""
    return (command, args)
