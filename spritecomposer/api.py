"""Public API definitions for spritecomposer CLI plugins."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Protocol

API_VERSION = "1.0"

_cli_logger = logging.getLogger("spritecomposer.cli")


@dataclass
class Context:
    """Execution context shared with plugins."""

    api_version: str = API_VERSION
    config: Dict[str, Any] = field(default_factory=dict)
    log: Callable[[str], None] = _cli_logger.info


class CLIPlugin(Protocol):
    """Protocol for command-line plugins."""

    name: str

    def register_subcommands(self, subparsers) -> None:
        """Allow the plugin to register CLI subcommands."""

    def handle(self, args, ctx: Context) -> bool:
        """Handle parsed arguments, returning ``True`` if processed."""
