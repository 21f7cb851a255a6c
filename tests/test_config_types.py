import pytest
import yaml

from magebox.config_types import (
    Command,
    Config,
    Domain,
    ServiceConfig,
    Services,
    ValidationError,
    config_to_dict,
    parse_command,
    parse_config,
    parse_service,
)


@pytest.mark.parametrize(
    "domain, expected",
    [
        (Domain(host="test.test"), "pub"),
        (Domain(host="test.test", root="public"), "public"),
    ],
)
def test_domain_get_root(domain, expected):
    assert domain.get_root() == expected


@pytest.mark.parametrize(
    "domain, expected",
    [
        (Domain(host="test.test"), True),
        (Domain(host="test.test", ssl=True), True),
        (Domain(host="test.test", ssl=False), False),
    ],
)
def test_domain_is_ssl_enabled(domain, expected):
    assert domain.is_ssl_enabled() is expected


def test_domain_get_store_code():
    assert Domain(host="a.test").get_store_code() == "default"
    assert Domain(host="a.test", store_code="de").get_store_code() == "de"


def test_config_validate_valid():
    config = Config(name="mystore", domains=[Domain(host="mystore.test")], php="8.2")
    config.validate()
    assert config.name == "mystore"


@pytest.mark.parametrize(
    "config, field",
    [
        (Config(domains=[Domain(host="mystore.test")], php="8.2"), "name"),
        (Config(name="mystore", php="8.2"), "domains"),
        (Config(name="mystore", domains=[], php="8.2"), "domains"),
        (Config(name="mystore", domains=[Domain(root="pub")], php="8.2"), "domains"),
        (Config(name="mystore", domains=[Domain(host="mystore.test")]), "php"),
    ],
)
def test_config_validate_errors(config, field):
    with pytest.raises(ValidationError) as excinfo:
        config.validate()
    assert excinfo.value.field == field


def test_validation_error_message_with_index():
    config = Config(name="s", domains=[Domain(host="a.test"), Domain()], php="8.2")
    with pytest.raises(ValidationError) as excinfo:
        config.validate()
    assert str(excinfo.value) == "domains[1]: domain host is required"


def test_validation_error_message_without_index():
    assert str(ValidationError("name", "name is required")) == "name: name is required"


@pytest.mark.parametrize(
    "text, enabled, version, port",
    [
        ('"8.0"', True, "8.0", 0),
        ("true", True, "", 0),
        ("false", False, "", 0),
        ('\nversion: "8.0"\nport: 3307', True, "8.0", 3307),
    ],
)
def test_parse_service(text, enabled, version, port):
    service = parse_service(yaml.safe_load(text))
    assert service.enabled is enabled
    assert service.version == version
    assert service.port == port


def test_parse_service_memory_and_other_scalar():
    assert parse_service({"memory": "2g"}).memory == "2g"
    assert parse_service(8) == ServiceConfig(enabled=True)


enabled = ServiceConfig(enabled=True, version="8.0")
disabled = ServiceConfig(enabled=False)


@pytest.mark.parametrize(
    "services, method, expected",
    [
        (Services(mysql=enabled), Services.has_mysql, True),
        (Services(mysql=disabled), Services.has_mysql, False),
        (Services(), Services.has_mysql, False),
        (Services(redis=enabled), Services.has_redis, True),
        (Services(opensearch=enabled), Services.has_opensearch, True),
        (Services(varnish=enabled), Services.has_varnish, True),
        (Services(mailpit=disabled), Services.has_mailpit, False),
    ],
)
def test_services_has_methods(services, method, expected):
    assert method(services) is expected


mysql = ServiceConfig(enabled=True, version="8.0")
mariadb = ServiceConfig(enabled=True, version="10.6")


@pytest.mark.parametrize(
    "services, expected_version",
    [
        (Services(mysql=mysql), "8.0"),
        (Services(mariadb=mariadb), "10.6"),
        (Services(mysql=mysql, mariadb=mariadb), "8.0"),
    ],
)
def test_get_database_service(services, expected_version):
    assert services.get_database_service().version == expected_version


def test_get_database_service_none():
    assert Services().get_database_service() is None


def test_get_search_service():
    opensearch = ServiceConfig(enabled=True, version="2.12")
    elastic = ServiceConfig(enabled=True, version="7.17")
    assert Services(opensearch=opensearch, elasticsearch=elastic).get_search_service() is opensearch
    assert Services(elasticsearch=elastic).get_search_service() is elastic
    assert Services().get_search_service() is None


def test_parse_command_forms():
    assert parse_command("bin/magento c:f") == Command(run="bin/magento c:f")
    assert parse_command({"description": "d", "run": "r"}) == Command(description="d", run="r")
    assert parse_command(42) == Command()


def test_parse_config_rejects_bad_domains():
    with pytest.raises(ValueError):
        parse_config({"domains": "not-a-list"})


def test_config_to_dict_round_trip():
    config = Config(
        name="mystore",
        domains=[Domain(host="mystore.test", ssl=False, root="pub/api")],
        php="8.3",
        services=Services(mysql=ServiceConfig(enabled=True, version="8.0", port=3307)),
        env={"MAGE_MODE": "developer"},
        commands={"deploy": Command(description="Deploy", run="make deploy")},
    )
    data = config_to_dict(config)
    assert data["services"] == {"mysql": {"version": "8.0", "port": 3307}}
    assert parse_config(yaml.safe_load(yaml.safe_dump(data))) == config