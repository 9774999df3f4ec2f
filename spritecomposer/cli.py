"""Command-line entry point for spritecomposer."""

import argparse
import logging

from .api import Context
from .config import load_config
from .logging_config import configure_logging
from .plugin_manager import collect
from .slicing import SliceConfigurationError

logger = logging.getLogger(__name__)


def build_cli():
    parser = argparse.ArgumentParser("spritecomposer")
    parser.add_argument("--log-level", help="override the configured log level")
    subparsers = parser.add_subparsers(dest="cmd")
    return parser, subparsers


def main(argv=None) -> int:
    config = load_config()
    ctx = Context(config=config)
    parser, subparsers = build_cli()
    cli_plugins = collect()

    for plugin in cli_plugins:
        try:
            plugin.register_subcommands(subparsers)
        except Exception as exc:
            logger.warning("register_subcommands failed in %s: %s", getattr(plugin, "name", "?"), exc)

    args = parser.parse_args(argv)
    log_cfg = config.get("logging", {})
    configure_logging(
        args.log_level or log_cfg.get("level"),
        max_bytes=int(log_cfg.get("max_bytes", 5 * 1024 * 1024)),
        backup_count=int(log_cfg.get("backup_count", 3)),
    )

    for plugin in cli_plugins:
        try:
            if plugin.handle(args, ctx):
                return 0
        except (SliceConfigurationError, FileNotFoundError, ValueError) as exc:
            logger.error("%s: %s", getattr(plugin, "name", "?"), exc)
            return 2
        except Exception:
            logger.exception("plugin %s failed", getattr(plugin, "name", "?"))
            return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
