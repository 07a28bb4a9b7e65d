from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from modconfig.commands.context import CommandContext
from modconfig.commands.dispatcher import SINGLE_SUCCESS, CommandDispatcher, CommandSpec
from modconfig.commands.source import ClientCommandSource, CommandSource, ServerCommandSource
from modconfig.exceptions import IllegalStateError, InvalidArgumentError, SourceTypeError
from modconfig.models import LiteralText, TranslatableText

if TYPE_CHECKING:
    from modconfig.config_manager import ConfigManager

logger = logging.getLogger(__name__)

CLIENT_PERMISSION_LEVEL = 0
SERVER_PERMISSION_LEVEL = 4

ReloadCallback = Callable[[CommandSource], None]


def _require(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} should not be None")


def _describe(config_handle: Any) -> str:
    return getattr(config_handle, "__name__", repr(config_handle))


class ConfigReloadCommand:
    """A command that reloads a configuration from disk.

    The same instance can be registered as a client-side command and as a
    server-side command under different names::

        command = (
            ConfigReloadCommand("examplereload", "cexamplereload", ExampleConfig, manager)
            .post_reload(lambda source: rebuild_caches())
            .server_success_message("Example config reloaded!")
        )
        command.register_server(server_dispatcher)
        command.register_client(client_dispatcher)

    ``pre_reload``, ``post_reload`` and ``server_success_message`` may each be
    set once, before the command is registered.
    """

    def __init__(
        self,
        name: str,
        client_name: str,
        config_class: Any,
        config_manager: ConfigManager,
    ):
        _require(name, "name")
        _require(client_name, "client_name")
        _require(config_class, "config_class")
        _require(config_manager, "config_manager")
        self._name = name
        self._client_name = client_name
        self._config_class = config_class
        self._config_manager = config_manager
        self._pre_reload: ReloadCallback | None = None
        self._post_reload: ReloadCallback | None = None
        self._server_success_message: str | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def client_name(self) -> str:
        return self._client_name

    @property
    def config_class(self) -> Any:
        return self._config_class

    def pre_reload(self, callback: ReloadCallback) -> ConfigReloadCommand:
        """Set the callback run just before the configuration is reloaded."""
        _require(callback, "pre_reload")
        if self._pre_reload is not None:
            raise IllegalStateError("pre_reload has already been set")
        self._pre_reload = callback
        return self

    def post_reload(self, callback: ReloadCallback) -> ConfigReloadCommand:
        """Set the callback run just after the configuration is reloaded."""
        _require(callback, "post_reload")
        if self._post_reload is not None:
            raise IllegalStateError("post_reload has already been set")
        self._post_reload = callback
        return self

    def server_success_message(self, message: str) -> ConfigReloadCommand:
        """Set the plain-text success message used on dedicated servers.

        Dedicated servers have no language files, so the translatable
        success text would reach operators as a bare key.
        """
        _require(message, "message")
        if self._server_success_message is not None:
            raise IllegalStateError("server_success_message has already been set")
        self._server_success_message = message
        return self

    def register_client(self, dispatcher: CommandDispatcher) -> None:
        _require(dispatcher, "dispatcher")
        self._register(dispatcher, self._client_name, CLIENT_PERMISSION_LEVEL)

    def register_server(self, dispatcher: CommandDispatcher) -> None:
        _require(dispatcher, "dispatcher")
        self._register(dispatcher, self._name, SERVER_PERMISSION_LEVEL)

    def _register(self, dispatcher: CommandDispatcher, name: str, permission_level: int) -> None:
        dispatcher.register(
            CommandSpec(
                name=name,
                handler=self.execute,
                permission_level=permission_level,
                description=f"Reload {_describe(self._config_class)} from disk",
            )
        )

    def execute(self, context: CommandContext) -> int:
        source = context.source

        if self._pre_reload is not None:
            self._pre_reload(source)

        logger.info(
            "Reloading %s from disk (requested by %s)",
            _describe(self._config_class),
            getattr(source, "name", source),
        )
        self._config_manager.reload_from_disk(self._config_class)

        if self._post_reload is not None:
            self._post_reload(source)

        dedicated = source.is_dedicated_server()

        if self._server_success_message is not None and dedicated:
            if not isinstance(source, ServerCommandSource):
                raise SourceTypeError(source)
            source.send_feedback(LiteralText(text=self._server_success_message), True)
        else:
            current_name = self._name if dedicated else self._client_name
            text = TranslatableText(key=f"commands.{current_name}.success")

            if isinstance(source, ServerCommandSource):
                source.send_feedback(text, True)
            elif isinstance(source, ClientCommandSource):
                source.send_feedback(text)
            else:
                raise SourceTypeError(source)

        return SINGLE_SUCCESS
