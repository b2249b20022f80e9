# src/color_palette_builder/cli.py
import argparse
import logging
import os
import sys


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-build",
        description="Merge Tailwind and Sass colors into one ordered palette JSON.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON options file (default: $PALETTE_CONFIG, else built-in defaults)",
    )
    parser.add_argument("--base-dir", dest="base_dir", default=None, help="Project root for relative paths")
    parser.add_argument("--output", default=None, help="Artifact path (default: palette.json)")
    parser.add_argument("--priority", choices=("tailwind", "sass"), default=None, help="Source that wins name collisions")
    parser.add_argument("--pretty", action="store_true", default=None, help="Indent the JSON output")
    parser.add_argument(
        "--theme-json",
        action="store_true",
        dest="theme_json",
        help="Write into settings.color.palette of a theme.json document",
    )
    parser.add_argument("--stdout", action="store_true", help="Print the palette instead of writing it")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def _overrides(args: argparse.Namespace, file_options: dict | None = None) -> dict:
    """Options given on the command line; `file_options` is the loaded options file, if any."""
    out: dict = {}
    if args.output:
        out["output"] = args.output
    if args.priority:
        out["priority"] = args.priority
    if args.pretty:
        out["pretty"] = True
    if args.theme_json:
        out["mode"] = "theme"
        if "output" not in out and not (file_options or {}).get("output"):
            out["output"] = "theme.json"
    return out


def main(argv=None):
    """CLI: build the palette from Tailwind/Sass sources and write the JSON artifact."""
    from dotenv import load_dotenv

    from .palette.orchestrator import build_from_options, merge_options, options_from_dict, run
    from .palette.output import render_palette
    from .utils import ConfigFileNotFound, ConfigParseError, ConfigResolveError, ConfigTypeError, load_config
    from .utils.log import enable_all_topics

    # Load env only at runtime (no import side effects)
    load_dotenv()

    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.debug:
        enable_all_topics()

    config_file = args.config or os.getenv("PALETTE_CONFIG")
    try:
        file_options = {}
        if config_file:
            file_options = load_config(config_file, mode="validated_dict", base_dir=args.base_dir)
        options = options_from_dict(merge_options(file_options, _overrides(args, file_options)), base_dir=args.base_dir)

        if args.stdout:
            print(render_palette(build_from_options(options), pretty=options.pretty))
        else:
            palette = run(options)
            print(f"🎨 {len(palette)} colors → {options.output}")
    except (ConfigFileNotFound, ConfigParseError, ConfigTypeError, ConfigResolveError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
