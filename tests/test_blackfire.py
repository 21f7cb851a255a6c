import pytest

from magebox.blackfire import Credentials, Status


@pytest.mark.parametrize(
    "installed, running, configured, expected",
    [
        (True, True, True, True),
        (False, True, True, False),
        (True, False, True, False),
        (True, True, False, False),
        (False, False, False, False),
    ],
)
def test_is_fully_configured(installed, running, configured, expected):
    status = Status(agent_installed=installed, agent_running=running, configured=configured)
    assert status.is_fully_configured() is expected


def test_has_any_extension_empty():
    assert Status().has_any_extension() is False


def test_has_any_extension_none_installed():
    status = Status(extension_installed={"8.2": False, "8.3": False})
    assert status.has_any_extension() is False


def test_has_any_extension_one_installed():
    status = Status(extension_installed={"8.2": False, "8.3": True})
    assert status.has_any_extension() is True


def test_status_maps_are_independent():
    first = Status()
    second = Status()
    first.extension_installed["8.2"] = True
    assert second.extension_installed == {}


def test_credentials_hold_values():
    creds = Credentials(server_id="server-id", server_token="token")
    assert creds.server_id == "server-id"
    assert creds.server_token == "token"
    assert creds.client_id == ""