"""Plugin discovery for the spritecomposer CLI."""

import importlib.metadata
import logging
from typing import List

from .api import CLIPlugin
from .plugins import populate_cmd, slice_cmd

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "spritecomposer.plugins"
BUILTIN_MODULES = [slice_cmd, populate_cmd]


def load_entrypoint_plugins() -> list:
    """Load plugin modules registered under ``spritecomposer.plugins``."""

    modules = []
    for entry in importlib.metadata.entry_points(group=ENTRY_POINT_GROUP):
        try:
            modules.append(entry.load())
        except Exception as exc:
            logger.warning("failed to load plugin entry point %s: %s", entry.name, exc)
    return modules


def collect(include_entry_points: bool = True) -> List[CLIPlugin]:
    """Return the built-in CLI plugins followed by any installed ones."""

    modules = list(BUILTIN_MODULES)
    if include_entry_points:
        modules += [m for m in load_entrypoint_plugins() if m not in modules]
    cli_plugins: List[CLIPlugin] = []
    for module in modules:
        plugin = getattr(module, "PLUGIN", None)
        if plugin is None:
            continue
        if hasattr(plugin, "register_subcommands") and hasattr(plugin, "handle"):
            cli_plugins.append(plugin)
    return cli_plugins
