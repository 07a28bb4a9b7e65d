from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from modconfig.models import Feedback, LiteralText, TranslatableText

logger = logging.getLogger(__name__)

Text = LiteralText | TranslatableText


class CommandSource(Protocol):
    """Whoever a command runs on behalf of: a player, the console, RCON..."""

    def has_permission_level(self, level: int) -> bool: ...

    def is_dedicated_server(self) -> bool: ...


@dataclass
class ServerCommandSource:
    name: str
    permission_level: int = 4
    dedicated: bool = True
    silent: bool = False
    feedback: list[Feedback] = field(default_factory=list)

    def has_permission_level(self, level: int) -> bool:
        return self.permission_level >= level

    def is_dedicated_server(self) -> bool:
        return self.dedicated

    def send_feedback(self, text: Text, broadcast_to_ops: bool) -> None:
        self.feedback.append(Feedback(text=text, broadcast_to_ops=broadcast_to_ops))
        if broadcast_to_ops and not self.silent:
            # Same shape as the server's admin log line
            logger.info("[%s: %s]", self.name, text)


@dataclass
class ClientCommandSource:
    name: str
    permission_level: int = 0
    feedback: list[Feedback] = field(default_factory=list)

    def has_permission_level(self, level: int) -> bool:
        return self.permission_level >= level

    def is_dedicated_server(self) -> bool:
        # Client-side commands never run on a dedicated server
        return False

    def send_feedback(self, text: Text) -> None:
        self.feedback.append(Feedback(text=text))
