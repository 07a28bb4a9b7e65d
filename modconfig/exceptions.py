class ModConfigException(Exception):
    """Base exception for configuration and command errors."""

    pass


class InvalidArgumentError(ModConfigException, ValueError):
    """Raised when a required argument is missing."""

    pass


class IllegalStateError(ModConfigException, RuntimeError):
    """Raised when a single-use setting is set a second time."""

    pass


class ConfigReloadError(ModConfigException):
    """Raised when a configuration cannot be (re)loaded from disk."""

    def __init__(self, config_class: type, path: str | None, reason: str):
        self.config_class = config_class
        self.path = path
        self.reason = reason
        name = getattr(config_class, "__name__", repr(config_class))
        super().__init__(f"Failed to load {name} from {path}: {reason}")


class ConfigNotRegisteredError(ConfigReloadError):
    def __init__(self, config_class: type):
        super().__init__(config_class, None, "configuration is not registered")


class SourceTypeError(ModConfigException, TypeError):
    """Raised when a command source is neither a server nor a client source."""

    def __init__(self, source: object):
        self.source = source
        super().__init__(f"Unsupported command source: {type(source).__name__}")


class CommandSyntaxError(ModConfigException):
    """Raised by the dispatcher when a command line cannot be executed."""

    def __init__(self, message: str, command_input: str):
        self.command_input = command_input
        super().__init__(message)
