"""Blackfire credentials and status."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Credentials:
    """Blackfire API credentials."""

    server_id: str = ""
    server_token: str = ""
    client_id: str = ""
    client_token: str = ""


@dataclass
class Status:
    """Current Blackfire state; extension maps are keyed by PHP version."""

    agent_installed: bool = False
    agent_running: bool = False
    extension_installed: dict[str, bool] = field(default_factory=dict)
    extension_enabled: dict[str, bool] = field(default_factory=dict)
    configured: bool = False

    def is_fully_configured(self) -> bool:
        """Return True if the agent is installed, running and configured."""
        return self.agent_installed and self.agent_running and self.configured

    def has_any_extension(self) -> bool:
        """Return True if any PHP version has the extension installed."""
        return any(self.extension_installed.values())