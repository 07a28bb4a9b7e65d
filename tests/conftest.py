from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from modconfig.commands.dispatcher import CommandDispatcher
from modconfig.commands.source import ClientCommandSource, ServerCommandSource
from modconfig.config import Settings
from modconfig.config_manager import ConfigManager


class ExampleConfig(BaseModel):
    spawn_protection: int = 16
    motd: str = "A Minecraft Server"
    allow_flight: bool = False


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        config_dir=str(tmp_path / "config"),
        log_level="INFO",
        log_json=False,
        log_file=str(tmp_path / "logs" / "test.log"),
    )


@pytest.fixture
def config_manager(tmp_path) -> ConfigManager:
    return ConfigManager(config_dir=str(tmp_path / "config"))


@pytest.fixture
def mock_config_manager():
    return MagicMock(spec=ConfigManager)


@pytest.fixture
def server_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


@pytest.fixture
def client_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


@pytest.fixture
def operator_source() -> ServerCommandSource:
    """An operator on a dedicated server."""
    return ServerCommandSource(name="Server", permission_level=4, dedicated=True)


@pytest.fixture
def integrated_source() -> ServerCommandSource:
    """An operator on an integrated (singleplayer/LAN) server."""
    return ServerCommandSource(name="Steve", permission_level=4, dedicated=False)


@pytest.fixture
def player_source() -> ServerCommandSource:
    return ServerCommandSource(name="Alex", permission_level=0, dedicated=True)


@pytest.fixture
def client_source() -> ClientCommandSource:
    return ClientCommandSource(name="Steve")
