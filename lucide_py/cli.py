"""CLI entry point for the lucide-py component generator."""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path

from .config import load_config
from .logging_utils import log_event
from .models.config import Config
from .naming.identifiers import IconNameError, derive_names
from .render.generator import Generator
from .validate.sources import validate_icon_sources


def _generate_run_id() -> str:
    """Generate a timestamp-based run ID."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project-root",
        type=str,
        default=None,
        help="Path to project root (default: auto-detect)",
    )
    parser.add_argument(
        "--source-dir",
        type=str,
        default=None,
        help="Directory of SVG icon sources (default: <root>/assets/icons)",
    )


def _config_from_args(args: argparse.Namespace) -> Config:
    return load_config(
        Path(args.project_root) if args.project_root else None,
        source_dir=Path(args.source_dir) if args.source_dir else None,
        output_dir=Path(args.output_dir) if getattr(args, "output_dir", None) else None,
    )


def cmd_check(args: argparse.Namespace) -> int:
    try:
        config = _config_from_args(args)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}")
        return 1
    errors = validate_icon_sources(Path(config.source_dir))
    if errors:
        for error in errors:
            print(f"ERROR: {error}")
        return 1
    print("Icon source validation passed.")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate one component module per SVG source plus the index module."""
    try:
        config = _config_from_args(args)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}")
        return 1

    run_id = args.run_id if args.run_id else _generate_run_id()
    log_path = Path(config.log_path)
    generator = Generator(
        Path(config.source_dir), Path(config.output_dir), config.sentinel_name
    )

    if generator.is_generated() and not args.force:
        log_event(log_path, "GENERATE_SKIPPED", {"sentinel_path": str(generator.sentinel_path)}, run_id)
        print(f"Icons already generated ({generator.sentinel_path} exists), nothing to do.")
        return 0

    # Validate sources first
    errors = validate_icon_sources(Path(config.source_dir))
    if errors:
        log_event(log_path, "VALIDATE_FAILED", {"errors": errors}, run_id)
        for error in errors:
            print(f"ERROR: {error}")
        return 1

    log_event(log_path, "GENERATE_START", {
        "source_dir": config.source_dir,
        "output_dir": config.output_dir,
        "force": bool(args.force),
    }, run_id)

    try:
        report = generator.generate(force=args.force)
    except (ValueError, FileNotFoundError) as exc:
        print(f"ERROR: {exc}")
        return 1

    log_event(log_path, "SOURCES_LOADED", {"source_count": report.source_count}, run_id)
    log_event(log_path, "GENERATE_DONE", {
        "index_path": report.index_path,
        "files_written": len(report.written_files),
        "files_removed": len(report.removed_files),
    }, run_id)

    if args.report:
        report_path = report.write_json(Path(args.report))
        print(f"Generation report saved to: {report_path}")

    print(f"Generated {report.source_count} icon components in: {config.output_dir}")
    print(f"Index module: {report.index_path}")
    return 0


def cmd_names(args: argparse.Namespace) -> int:
    status = 0
    for file_name in args.files:
        try:
            names = derive_names(Path(file_name).name)
        except IconNameError as exc:
            print(f"ERROR: {exc}")
            status = 1
            continue
        print(f"{file_name} -> {names.pascal_name} {names.module_name}")
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="lucide-py - Lucide SVG to Python component generator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Generate command
    generate_parser = subparsers.add_parser(
        "generate", help="Generate component modules and the index from SVG sources"
    )
    _add_common_args(generate_parser)
    generate_parser.add_argument(
        "--output-dir", type=str, default=None,
        help="Package directory for generated modules (default: <root>/lucide_py/icons)",
    )
    generate_parser.add_argument(
        "--force", action="store_true", help="Regenerate even if the sentinel file exists"
    )
    generate_parser.add_argument(
        "--run-id", type=str, default=None, help="Run ID (default: auto-generated timestamp)"
    )
    generate_parser.add_argument(
        "--report", type=str, default=None, help="Write a JSON generation report to this path"
    )
    generate_parser.set_defaults(func=cmd_generate)

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Validate SVG sources without writing anything"
    )
    _add_common_args(check_parser)
    check_parser.set_defaults(func=cmd_check)

    # Names command
    names_parser = subparsers.add_parser(
        "names", help="Show the component and module names derived from filenames"
    )
    names_parser.add_argument("files", nargs="+", help="Icon filenames, e.g. arrow-up-circle.svg")
    names_parser.set_defaults(func=cmd_names)

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
