"""CLI plugin that slices a sheet into named frames."""

import os

from spritecomposer.api import CLIPlugin, Context
from spritecomposer.slicing import export_frames, load_specification, slice_sheet, write_mapping
from spritecomposer.slicing.transparency import Sheet


class SliceCLI:
    """Provide the ``slice`` command."""

    name = "slice"

    def register_subcommands(self, subparsers) -> None:
        parser = subparsers.add_parser("slice", help="Slice a sheet into named frames")
        parser.add_argument("image")
        parser.add_argument("--spec", required=True, help="row specification JSON")
        parser.add_argument("--cell", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"))
        parser.add_argument("-o", "--output", help="mapping JSON path (default: next to the image)")
        parser.add_argument("--frames", help="also write one PNG per frame into this folder")

    def handle(self, args, ctx: Context) -> bool:
        if getattr(args, "cmd", "") != "slice":
            return False

        slicer_cfg = (ctx.config or {}).get("slicer", {})
        if args.cell:
            cell_w, cell_h = args.cell
        else:
            cell_w = int(slicer_cfg.get("cell_width", 64))
            cell_h = int(slicer_cfg.get("cell_height", 64))

        spec = load_specification(args.spec)
        sheet, rgba = Sheet.open_with_image(args.image)
        result = slice_sheet(sheet, spec, cell_w, cell_h)
        for message in result.warnings:
            ctx.log(f"[slice] warning: {message}")

        # No mapping is written unless the export succeeded.
        frames_dir = args.frames
        if frames_dir is None and slicer_cfg.get("export_frames"):
            frames_dir = os.path.splitext(args.image)[0] + "_frames"
        if frames_dir:
            written = export_frames(rgba, result.frames, frames_dir)
            ctx.log(f"[slice] wrote {len(written)} PNGs to {frames_dir}")

        output = args.output or os.path.splitext(args.image)[0] + ".frames.json"
        write_mapping(result, output, spec)
        ctx.log(f"[slice] {len(result.frames)} frames -> {output}")
        return True


PLUGIN: CLIPlugin = SliceCLI()
