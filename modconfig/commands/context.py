from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modconfig.commands.source import CommandSource


@dataclass
class CommandContext:
    source: CommandSource
    input: str
    command: str
    args: str = ""
    dispatcher: Any = field(default=None, repr=False)
