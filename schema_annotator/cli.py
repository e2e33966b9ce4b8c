"""CLI entry point for the schema annotator."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from schema_annotator import __version__, logger
from schema_annotator.annotations import AnnotationTable, load_annotations
from schema_annotator.exceptions import PackageError
from schema_annotator.io_utils import read_json_content
from schema_annotator.logging import configure_logging
from schema_annotator.schema_builder import generate_schema_text
from schema_annotator.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="schema-annotator")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    infer_parser = subparsers.add_parser("infer", help="Infer a JSON Schema from a sample JSON document")
    infer_parser.add_argument("input_path", type=Path)
    infer_parser.add_argument("--annotations", type=Path, default=None, dest="annotations_path")
    infer_parser.add_argument("--output", type=Path, default=None, dest="output_path")
    infer_parser.add_argument("--indent", type=int, default=None)

    serve_parser = subparsers.add_parser("serve", help="Launch the annotation web app")
    serve_parser.add_argument("--host", default=None, dest="server_name")
    serve_parser.add_argument("--port", type=int, default=None, dest="server_port")

    return parser


def run_infer(args: argparse.Namespace) -> str:
    """Build the schema text for the `infer` command.

    Args:
        args (argparse.Namespace): Parsed CLI args.

    Returns:
        str: Rendered schema.
    """
    document = read_json_content(args.input_path)
    annotations = load_annotations(args.annotations_path) if args.annotations_path else AnnotationTable()
    indent = args.indent if args.indent is not None else get_settings().schema_indent
    return generate_schema_text(document, annotations, indent=indent)


def run_serve(args: argparse.Namespace) -> None:
    from schema_annotator.ui import build_demo

    settings = get_settings()
    demo = build_demo(settings)
    demo.launch(
        server_name=args.server_name or settings.server_name,
        server_port=args.server_port or settings.server_port,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

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

    try:
        if args.command == "serve":
            run_serve(args)
            return 0

        schema_text = run_infer(args)
    except (PackageError, OSError) as exc:
        logger.error("Command failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output_path:
        args.output_path.parent.mkdir(parents=True, exist_ok=True)
        args.output_path.write_text(schema_text + "\n", encoding="utf-8")
        logger.info("Schema written", output_path=str(args.output_path))
    else:
        print(schema_text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
