"""Project and global configuration, bootstrap helpers, console output and log tailing for local Magento development."""

__version__ = "0.1.0"

__all__ = [
    "blackfire",
    "bootstrap",
    "colors",
    "config_loader",
    "config_types",
    "global_config",
    "logs",
]