"""Loading, merging and saving project configuration files."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path

import yaml

from magebox.config_types import Config, Services, config_to_dict, parse_config

CONFIG_FILE_NAME = ".magebox.yaml"
CONFIG_FILE_NAME_LEGACY = ".magebox"
LOCAL_CONFIG_FILE_NAME = ".magebox.local.yaml"
LOCAL_CONFIG_FILE_NAME_LEGACY = ".magebox.local"


class ConfigNotFoundError(Exception):
    """No project configuration file exists."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = str(path)
        super().__init__(
            f"configuration file not found: {self.path}\n\nRun 'magebox init' to create one"
        )


class ParseError(Exception):
    """A configuration file could not be parsed."""

    def __init__(self, path: str | os.PathLike, error: Exception) -> None:
        self.path = str(path)
        self.error = error
        super().__init__(f"failed to parse {self.path}: {error}")


class Loader:
    """Loads the main project config and merges the local override onto it."""

    def __init__(self, base_path: str | os.PathLike) -> None:
        self.base_path = Path(base_path)

    def load(self) -> Config:
        """Load, merge and validate the configuration."""
        main_path = self.base_path / CONFIG_FILE_NAME
        try:
            main = self._load_file(main_path)
        except FileNotFoundError:
            try:
                main = self._load_file(self.base_path / CONFIG_FILE_NAME_LEGACY)
            except FileNotFoundError:
                raise ConfigNotFoundError(main_path) from None
            except OSError as exc:
                raise OSError(f"failed to load {CONFIG_FILE_NAME_LEGACY}: {exc}") from exc
        except OSError as exc:
            raise OSError(f"failed to load {CONFIG_FILE_NAME}: {exc}") from exc

        local = self._load_local()
        config = self._merge(main, local)
        config.validate()
        return config

    def _load_local(self) -> Config | None:
        for name in (LOCAL_CONFIG_FILE_NAME, LOCAL_CONFIG_FILE_NAME_LEGACY):
            try:
                return self._load_file(self.base_path / name)
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise OSError(f"failed to load local config: {exc}") from exc
        return None

    @staticmethod
    def _load_file(path: Path) -> Config:
        text = path.read_text(encoding="utf-8")
        try:
            return parse_config(yaml.safe_load(text))
        except (yaml.YAMLError, ValueError) as exc:
            raise ParseError(path, exc) from exc

    @staticmethod
    def _merge(main: Config, local: Config | None) -> Config:
        if local is None:
            return main
        return dataclasses.replace(
            main,
            name=local.name or main.name,
            php=local.php or main.php,
            domains=local.domains if local.domains else main.domains,
            services=_merge_services(main.services, local.services),
            env={**main.env, **local.env},
            commands={**main.commands, **local.commands},
        )


def _merge_services(main: Services, local: Services) -> Services:
    overrides = {
        service_field.name: value
        for service_field in dataclasses.fields(Services)
        if (value := getattr(local, service_field.name)) is not None
    }
    return dataclasses.replace(main, **overrides)


def load_from_path(path: str | os.PathLike) -> Config:
    """Load the project configuration stored in ``path``."""
    return Loader(path).load()


def load_from_current_dir() -> Config:
    """Load the project configuration of the current working directory."""
    return load_from_path(os.getcwd())


def save_to_path(config: Config, path: str | os.PathLike) -> None:
    """Write ``config`` to the main configuration file in ``path``."""
    text = yaml.safe_dump(config_to_dict(config), sort_keys=False, allow_unicode=True)
    (Path(path) / CONFIG_FILE_NAME).write_text(text, encoding="utf-8")