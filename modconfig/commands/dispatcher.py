from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from modconfig.commands.context import CommandContext
from modconfig.commands.parser import parse_command
from modconfig.commands.source import CommandSource
from modconfig.exceptions import CommandSyntaxError

logger = logging.getLogger(__name__)

SINGLE_SUCCESS = 1


@dataclass
class CommandSpec:
    name: str
    handler: Callable[[CommandContext], int]
    permission_level: int = 0
    description: str = ""
    # Plain literals reject trailing input
    accepts_args: bool = False

    def can_use(self, source: CommandSource) -> bool:
        return source.has_permission_level(self.permission_level)


class CommandDispatcher:
    """Literal command table guarded by permission levels."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        key = spec.name.lower()
        if key in self._commands:
            logger.warning("Command %s registered twice, replacing the previous handler", key)
        self._commands[key] = spec
        logger.debug("Registered command: %s (permission level %d)", key, spec.permission_level)

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name.lower())

    def list_commands(self) -> list[CommandSpec]:
        return list(self._commands.values())

    def list_usable(self, source: CommandSource) -> list[CommandSpec]:
        return [spec for spec in self._commands.values() if spec.can_use(source)]

    def execute(self, text: str, source: CommandSource) -> int:
        """Run a command line on behalf of ``source`` and return its status.

        Commands the source lacks permission for are reported exactly like
        unknown ones. Trailing arguments are rejected unless the command
        accepts them. Exceptions raised by the handler are not caught.
        """
        parsed = parse_command(text)
        if parsed is None:
            raise CommandSyntaxError("Empty command", text)

        cmd_name, args = parsed
        spec = self._commands.get(cmd_name)
        if spec is None or not spec.can_use(source):
            raise CommandSyntaxError(f"Unknown command: {cmd_name}", text)
        if args and not spec.accepts_args:
            raise CommandSyntaxError(f"Incorrect argument for command: {args}", text)

        context = CommandContext(
            source=source,
            input=text,
            command=cmd_name,
            args=args,
            dispatcher=self,
        )
        return spec.handler(context)
