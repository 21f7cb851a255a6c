"""Global settings shared by all projects, stored under the user's home directory."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

_HEADER = (
    "# MageBox Global Configuration\n"
    "# This file is managed by MageBox. Edit with care.\n\n"
)


@dataclass
class BlackfireCredentials:
    """Blackfire API credentials."""

    server_id: str = ""
    server_token: str = ""
    client_id: str = ""
    client_token: str = ""


@dataclass
class TidewaysCredentials:
    """Tideways API credentials."""

    api_key: str = ""


@dataclass
class ProfilingConfig:
    """Credentials for profiling tools."""

    blackfire: BlackfireCredentials = field(default_factory=BlackfireCredentials)
    tideways: TidewaysCredentials = field(default_factory=TidewaysCredentials)


@dataclass
class DefaultServices:
    """Services enabled for new projects by default."""

    mysql: str = ""
    mariadb: str = ""
    redis: bool = False
    opensearch: str = ""
    rabbitmq: bool = False
    mailpit: bool = False


@dataclass
class GlobalConfig:
    """The global configuration."""

    dns_mode: str = ""
    default_php: str = ""
    default_services: DefaultServices = field(default_factory=DefaultServices)
    portainer: bool = False
    tld: str = ""
    editor: str = ""
    auto_start: bool = False
    profiling: ProfilingConfig = field(default_factory=ProfilingConfig)

    def apply_defaults(self) -> None:
        """Fill in DNS mode, default PHP and TLD where they are unset."""
        defaults = default_global_config()
        self.dns_mode = self.dns_mode or defaults.dns_mode
        self.default_php = self.default_php or defaults.default_php
        self.tld = self.tld or defaults.tld

    def use_dnsmasq(self) -> bool:
        return self.dns_mode == "dnsmasq"

    def use_hosts(self) -> bool:
        return self.dns_mode in ("hosts", "")

    def get_tld(self) -> str:
        """Return the configured TLD, falling back to ``test``."""
        return self.tld or "test"

    def has_blackfire_credentials(self) -> bool:
        creds = self.profiling.blackfire
        return bool(creds.server_id and creds.server_token)

    def has_blackfire_client_credentials(self) -> bool:
        creds = self.profiling.blackfire
        return bool(creds.client_id and creds.client_token)

    def has_tideways_credentials(self) -> bool:
        return bool(self.profiling.tideways.api_key)

    def get_blackfire_credentials(self) -> BlackfireCredentials:
        """Return Blackfire credentials, with environment variables taking precedence."""
        creds = self.profiling.blackfire
        return dataclasses.replace(
            creds,
            server_id=os.environ.get("BLACKFIRE_SERVER_ID") or creds.server_id,
            server_token=os.environ.get("BLACKFIRE_SERVER_TOKEN") or creds.server_token,
            client_id=os.environ.get("BLACKFIRE_CLIENT_ID") or creds.client_id,
            client_token=os.environ.get("BLACKFIRE_CLIENT_TOKEN") or creds.client_token,
        )

    def get_tideways_credentials(self) -> TidewaysCredentials:
        """Return Tideways credentials, with the environment taking precedence."""
        creds = self.profiling.tideways
        return dataclasses.replace(
            creds, api_key=os.environ.get("TIDEWAYS_API_KEY") or creds.api_key
        )


def _scalar_text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ValueError(f"{where}: expected a scalar value")
    return str(value)


def _scalar_bool(value: Any, where: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{where}: expected a boolean")
    return value


def _from_mapping(cls: type, data: Any, where: str) -> Any:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected a mapping")
    values: dict[str, Any] = {}
    for item in dataclasses.fields(cls):
        raw = data.get(item.name)
        key = f"{where}.{item.name}" if where else item.name
        if item.default_factory is not dataclasses.MISSING:
            nested = item.default_factory()
            values[item.name] = _from_mapping(type(nested), raw, key)
        elif isinstance(item.default, bool):
            values[item.name] = _scalar_bool(raw, key)
        else:
            values[item.name] = _scalar_text(raw, key)
    return cls(**values)


def _to_mapping(obj: Any) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for item in dataclasses.fields(obj):
        value = getattr(obj, item.name)
        if dataclasses.is_dataclass(value):
            value = _to_mapping(value)
        if value:
            result[item.name] = value
    return result


def global_config_path(home_dir: str | os.PathLike) -> str:
    """Return the path of the global configuration file."""
    return os.path.join(home_dir, ".magebox", "config.yaml")


def default_global_config() -> GlobalConfig:
    """Return a configuration holding the defaults."""
    return GlobalConfig(
        dns_mode="hosts",
        default_php="8.2",
        default_services=DefaultServices(mysql="8.0", redis=True),
        portainer=False,
        tld="test",
        auto_start=False,
    )


def load_global_config(home_dir: str | os.PathLike) -> GlobalConfig:
    """Load the global configuration, or the defaults if none is saved."""
    config_path = Path(global_config_path(home_dir))
    if not config_path.exists():
        return default_global_config()
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to read global config: {exc}") from exc
    try:
        config = _from_mapping(GlobalConfig, yaml.safe_load(text), "")
    except (yaml.YAMLError, ValueError) as exc:
        raise ValueError(f"failed to parse global config: {exc}") from exc
    config.apply_defaults()
    return config


def save_global_config(home_dir: str | os.PathLike, config: GlobalConfig) -> None:
    """Write the global configuration, creating its directory if needed."""
    config_path = Path(global_config_path(home_dir))
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed to create config directory: {exc}") from exc
    data = yaml.safe_dump(_to_mapping(config), sort_keys=False, allow_unicode=True)
    if data.strip() == "{}":
        data = "{}\n"
    try:
        config_path.write_text(_HEADER + data, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to write config file: {exc}") from exc


def init_global_config(home_dir: str | os.PathLike) -> None:
    """Create the global configuration with defaults unless it already exists."""
    if global_config_exists(home_dir):
        return
    save_global_config(home_dir, default_global_config())


def global_config_exists(home_dir: str | os.PathLike) -> bool:
    return Path(global_config_path(home_dir)).exists()