"""CLI entry point for InfoPathReader."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from infopathreader import __version__, logger
from infopathreader.dependencies import ensure_cabextract_available, ensure_package_dependencies
from infopathreader.exceptions import PackageError
from infopathreader.infopath import InfopathDocument
from infopathreader.logging import configure_logging
from infopathreader.settings import Settings, get_settings
from infopathreader.typing.models import field_table_to_json_dict


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="infopathreader")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("form_path", type=Path, help="InfoPath .xsn file or source files directory")
    common.add_argument("--output", type=Path, default=None, dest="output_path")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("views", parents=[common], help="List the views of a form")

    schema_parser = subparsers.add_parser("schema", parents=[common], help="Print the inferred field table as JSON")
    schema_parser.add_argument(
        "--no-group-checkboxes",
        action="store_false",
        dest="group_checkboxes",
        default=None,
    )

    render_parser = subparsers.add_parser("render", parents=[common], help="Render a view to HTML")
    render_parser.add_argument("view")
    render_parser.add_argument("--form", action="store_true", dest="as_form")
    render_parser.add_argument("--action", default=None)
    render_parser.add_argument("--method", default=None)

    template_parser = subparsers.add_parser(
        "template",
        parents=[common],
        help="Convert a view into a Savant template with FormBuilder hooks",
    )
    template_parser.add_argument("view")

    return parser


def _form_attributes(args: argparse.Namespace) -> dict[str, str] | bool | None:
    """Build the `form_attrs` argument of `InfopathDocument.get_view`.

    Args:
        args (argparse.Namespace): Parsed CLI args.

    Returns:
        dict[str, str] | bool | None: Explicit attributes, True for the
        manifest's submit declaration, None to leave the view as is.
    """
    explicit = {key: value for key, value in (("action", args.action), ("method", args.method)) if value}
    if explicit:
        return explicit
    return True if args.as_form else None


def run_command(args: argparse.Namespace, settings: Settings) -> str:
    """Execute a parsed command.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings.

    Returns:
        str: Command output.
    """
    if not args.form_path.is_dir():
        ensure_cabextract_available(settings.cabextract_path)
    document = InfopathDocument.open(args.form_path, settings=settings)

    if args.command == "views":
        return "\n".join(document.list_views()) + "\n"
    if args.command == "schema":
        table = document.get_schema(group_checkboxes=args.group_checkboxes)
        return json.dumps(field_table_to_json_dict(table), indent=2, ensure_ascii=False) + "\n"
    if args.command == "render":
        return document.get_view(args.view, form_attrs=_form_attributes(args))
    return document.get_template(args.view)


def _write_output(payload: str, output_path: Path | None) -> None:
    if output_path is None:
        sys.stdout.write(payload)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(payload, encoding="utf-8")
    logger.info("Output written", extra={"output_path": str(output_path)})


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments, defaults to `sys.argv[1:]`.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    ensure_package_dependencies()

    try:
        payload = run_command(args, settings)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1
    except KeyboardInterrupt:
        logger.info("Command aborted by user")
        return 130

    _write_output(payload, args.output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
