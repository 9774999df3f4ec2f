"""CLI plugin that fills a template sprite library from a sliced sheet."""

import json
import logging
import os

from spritecomposer.api import CLIPlugin, Context
from spritecomposer.library import populate_library

logger = logging.getLogger(__name__)


def _read_json(path: str):
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8-sig") as handle:
        return json.load(handle)


def unique_path(path: str) -> str:
    """Return ``path``, or ``{base}_{n}{ext}`` for the first ``n`` not taken."""

    if not os.path.exists(path):
        return path
    base, ext = os.path.splitext(path)
    n = 1
    while os.path.exists(f"{base}_{n}{ext}"):
        n += 1
    return f"{base}_{n}{ext}"


class PopulateCLI:
    """Provide the ``populate`` command."""

    name = "populate"

    def register_subcommands(self, subparsers) -> None:
        parser = subparsers.add_parser("populate", help="Build a library from a template and a sliced sheet")
        parser.add_argument("template", help="library JSON: {category: {label: sprite}}")
        parser.add_argument("mapping", help="mapping JSON written by 'slice'")
        parser.add_argument("-o", "--output", help="library JSON path (default: next to the mapping)")

    def handle(self, args, ctx: Context) -> bool:
        if getattr(args, "cmd", "") != "populate":
            return False

        template = _read_json(args.template)
        if not isinstance(template, dict) or not all(isinstance(v, dict) for v in template.values()):
            raise ValueError(f"{args.template}: expected an object of categories mapping labels to sprites")
        mapping = _read_json(args.mapping)
        sheet = mapping.get("sheet", "")
        sprites = {}
        for frame in mapping.get("frames", []):
            name = frame["name"]
            if name in sprites:
                # First frame with a name wins; later ones are reported.
                message = f"duplicate frame name '{name}' in {args.mapping}; keeping the first"
                logger.warning(message)
                ctx.log(f"[populate] warning: {message}")
                continue
            sprites[name] = {"sheet": sheet, "rect": frame["rect"]}

        library, replaced = populate_library(template, sprites)

        output = args.output
        if not output:
            stem = os.path.splitext(args.mapping)[0]
            if stem.endswith(".frames"):
                stem = stem[: -len(".frames")]
            output = unique_path(stem + ".library.json")
        with open(output, "w", encoding="utf-8") as handle:
            json.dump(library, handle, indent=2)
        ctx.log(f"[populate] {replaced} labels taken from {sheet or args.mapping} -> {output}")
        return True


PLUGIN: CLIPlugin = PopulateCLI()
