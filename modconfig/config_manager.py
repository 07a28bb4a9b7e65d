from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from modconfig.exceptions import (
    ConfigNotRegisteredError,
    ConfigReloadError,
    IllegalStateError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Keeps one live instance per registered config model, backed by a JSON file."""

    def __init__(self, config_dir: str = "config"):
        self._config_dir = Path(config_dir)
        self._paths: dict[type[BaseModel], Path] = {}
        self._configs: dict[type[BaseModel], BaseModel] = {}

    def register(self, config_class: type[BaseModel], name: str | None = None) -> BaseModel:
        """Register a config model and load it, writing defaults if the file is missing.

        Nothing is recorded unless the load or the defaults write succeeds,
        so a failed registration can be retried.
        """
        if not (isinstance(config_class, type) and issubclass(config_class, BaseModel)):
            raise InvalidArgumentError(f"{config_class!r} is not a pydantic model")
        if config_class in self._paths:
            raise IllegalStateError(f"{config_class.__name__} has already been registered")

        path = self._config_dir / f"{name or config_class.__name__.lower()}.json"

        if path.exists():
            config = self._load(config_class, path)
        else:
            config = config_class()
            self._write(path, config)
            logger.info("Created default config %s at %s", config_class.__name__, path)

        self._paths[config_class] = path
        self._configs[config_class] = config
        return config

    def path_for(self, config_class: type[BaseModel]) -> Path:
        path = self._paths.get(config_class)
        if path is None:
            raise ConfigNotRegisteredError(config_class)
        return path

    def get(self, config_class: type[BaseModel]) -> BaseModel:
        config = self._configs.get(config_class)
        if config is None:
            raise ConfigNotRegisteredError(config_class)
        return config

    def reload_from_disk(self, config_class: type[BaseModel]) -> BaseModel:
        """Re-read a config file. On failure the previous instance is kept."""
        config = self._load(config_class, self.path_for(config_class))
        self._configs[config_class] = config
        return config

    def write_to_disk(self, config_class: type[BaseModel]) -> None:
        self._write(self.path_for(config_class), self.get(config_class))

    def _load(self, config_class: type[BaseModel], path: Path) -> BaseModel:
        try:
            text = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigReloadError(config_class, str(path), str(exc)) from exc

        try:
            config = config_class.model_validate_json(text)
        except ValidationError as exc:
            raise ConfigReloadError(config_class, str(path), str(exc)) from exc

        logger.info("Loaded config %s from %s", config_class.__name__, path)
        return config

    @staticmethod
    def _write(path: Path, config: BaseModel) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(config.model_dump_json(indent=2) + "\n", encoding="utf-8")
