"""Project configuration model: domains, services, commands and validation."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any


@dataclass
class Command:
    """A custom command runnable by name within a project."""

    description: str = ""
    run: str = ""


@dataclass
class Domain:
    """A domain served for the project."""

    host: str = ""
    root: str = ""
    ssl: bool | None = None
    store_code: str = ""

    def get_root(self) -> str:
        """Return the document root, defaulting to ``pub``."""
        return self.root or "pub"

    def is_ssl_enabled(self) -> bool:
        """Return whether SSL is enabled, defaulting to ``True``."""
        return True if self.ssl is None else self.ssl

    def get_store_code(self) -> str:
        """Return the Magento store code, defaulting to ``default``."""
        return self.store_code or "default"


@dataclass
class ServiceConfig:
    """Settings of a single service."""

    enabled: bool = False
    version: str = ""
    port: int = 0
    memory: str = ""


@dataclass
class Services:
    """The services a project uses; ``None`` means not configured."""

    mysql: ServiceConfig | None = None
    mariadb: ServiceConfig | None = None
    redis: ServiceConfig | None = None
    opensearch: ServiceConfig | None = None
    elasticsearch: ServiceConfig | None = None
    rabbitmq: ServiceConfig | None = None
    mailpit: ServiceConfig | None = None
    varnish: ServiceConfig | None = None

    @staticmethod
    def _on(service: ServiceConfig | None) -> bool:
        return service is not None and service.enabled

    def has_mysql(self) -> bool:
        return self._on(self.mysql)

    def has_mariadb(self) -> bool:
        return self._on(self.mariadb)

    def has_redis(self) -> bool:
        return self._on(self.redis)

    def has_opensearch(self) -> bool:
        return self._on(self.opensearch)

    def has_elasticsearch(self) -> bool:
        return self._on(self.elasticsearch)

    def has_rabbitmq(self) -> bool:
        return self._on(self.rabbitmq)

    def has_mailpit(self) -> bool:
        return self._on(self.mailpit)

    def has_varnish(self) -> bool:
        return self._on(self.varnish)

    def get_database_service(self) -> ServiceConfig | None:
        """Return MySQL if enabled, else MariaDB if enabled, else ``None``."""
        if self.has_mysql():
            return self.mysql
        if self.has_mariadb():
            return self.mariadb
        return None

    def get_search_service(self) -> ServiceConfig | None:
        """Return OpenSearch if enabled, else Elasticsearch if enabled, else ``None``."""
        if self.has_opensearch():
            return self.opensearch
        if self.has_elasticsearch():
            return self.elasticsearch
        return None


class ValidationError(ValueError):
    """A configuration value is missing or invalid."""

    def __init__(self, field: str, message: str, index: int = 0) -> None:
        self.field = field
        self.message = message
        self.index = index
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.index > 0:
            return f"{self.field}[{self.index}]: {self.message}"
        return f"{self.field}: {self.message}"


@dataclass
class Config:
    """A project configuration."""

    name: str = ""
    domains: list[Domain] = field(default_factory=list)
    php: str = ""
    php_ini: dict[str, str] = field(default_factory=dict)
    services: Services = field(default_factory=Services)
    env: dict[str, str] = field(default_factory=dict)
    commands: dict[str, Command] = field(default_factory=dict)

    def validate(self) -> None:
        """Raise :class:`ValidationError` if a required value is missing."""
        if not self.name:
            raise ValidationError("name", "name is required")
        if not self.domains:
            raise ValidationError("domains", "at least one domain is required")
        for index, domain in enumerate(self.domains):
            if not domain.host:
                raise ValidationError("domains", "domain host is required", index)
        if not self.php:
            raise ValidationError("php", "php version is required")


def _text(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise ValueError(f"{where}: expected a scalar value, got {type(value).__name__}")
    return str(value)


def _mapping(value: Any, where: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected a mapping, got {type(value).__name__}")
    return value


def _string_map(value: Any, where: str) -> dict[str, str]:
    return {
        _text(key, where): _text(item, f"{where}.{key}")
        for key, item in _mapping(value, where).items()
    }


def parse_command(raw: Any) -> Command:
    """Build a command from a plain string or a ``{description, run}`` mapping."""
    if isinstance(raw, str):
        return Command(run=raw)
    if isinstance(raw, dict):
        run = raw.get("run")
        description = raw.get("description")
        return Command(
            description=description if isinstance(description, str) else "",
            run=run if isinstance(run, str) else "",
        )
    return Command()


def parse_service(raw: Any) -> ServiceConfig:
    """Build a service from a bool, a version string or a settings mapping."""
    if isinstance(raw, bool):
        return ServiceConfig(enabled=raw)
    if isinstance(raw, str):
        return ServiceConfig(enabled=True, version=raw)
    if isinstance(raw, dict):
        service = ServiceConfig(enabled=True)
        version = raw.get("version")
        port = raw.get("port")
        memory = raw.get("memory")
        if isinstance(version, str):
            service.version = version
        if isinstance(port, int) and not isinstance(port, bool):
            service.port = port
        if isinstance(memory, str):
            service.memory = memory
        return service
    return ServiceConfig(enabled=True)


def _parse_domain(raw: Any, index: int) -> Domain:
    data = _mapping(raw, f"domains[{index}]")
    ssl = data.get("ssl")
    if ssl is not None and not isinstance(ssl, bool):
        raise ValueError(f"domains[{index}].ssl: expected a boolean")
    return Domain(
        host=_text(data.get("host"), "host"),
        root=_text(data.get("root"), "root"),
        ssl=ssl,
        store_code=_text(data.get("store_code"), "store_code"),
    )


def _parse_services(raw: Any) -> Services:
    data = _mapping(raw, "services")
    services = Services()
    for service_field in fields(Services):
        value = data.get(service_field.name)
        if value is not None:
            setattr(services, service_field.name, parse_service(value))
    return services


def parse_config(data: Any) -> Config:
    """Build a :class:`Config` from parsed YAML data; raise ValueError on bad shapes."""
    values = _mapping(data, "config")
    domains_raw = values.get("domains")
    if domains_raw is None:
        domains_raw = []
    if not isinstance(domains_raw, list):
        raise ValueError("domains: expected a list")
    return Config(
        name=_text(values.get("name"), "name"),
        domains=[_parse_domain(item, index) for index, item in enumerate(domains_raw)],
        php=_text(values.get("php"), "php"),
        php_ini=_string_map(values.get("php_ini"), "php_ini"),
        services=_parse_services(values.get("services")),
        env=_string_map(values.get("env"), "env"),
        commands={
            _text(key, "commands"): parse_command(value)
            for key, value in _mapping(values.get("commands"), "commands").items()
        },
    )


def _service_to_dict(service: ServiceConfig) -> dict[str, Any]:
    result: dict[str, Any] = {}
    if service.version:
        result["version"] = service.version
    if service.port:
        result["port"] = service.port
    if service.memory:
        result["memory"] = service.memory
    return result


def _domain_to_dict(domain: Domain) -> dict[str, Any]:
    result: dict[str, Any] = {"host": domain.host}
    if domain.root:
        result["root"] = domain.root
    if domain.ssl is not None:
        result["ssl"] = domain.ssl
    if domain.store_code:
        result["store_code"] = domain.store_code
    return result


def _command_to_dict(command: Command) -> dict[str, str]:
    result: dict[str, str] = {}
    if command.description:
        result["description"] = command.description
    result["run"] = command.run
    return result


def config_to_dict(config: Config) -> dict[str, Any]:
    """Return the YAML-ready representation of a configuration."""
    result: dict[str, Any] = {
        "name": config.name,
        "domains": [_domain_to_dict(domain) for domain in config.domains],
        "php": config.php,
    }
    if config.php_ini:
        result["php_ini"] = dict(sorted(config.php_ini.items()))
    result["services"] = {
        service_field.name: _service_to_dict(service)
        for service_field in fields(Services)
        if (service := getattr(config.services, service_field.name)) is not None
    }
    if config.env:
        result["env"] = dict(sorted(config.env.items()))
    if config.commands:
        result["commands"] = {
            name: _command_to_dict(command) for name, command in sorted(config.commands.items())
        }
    return result