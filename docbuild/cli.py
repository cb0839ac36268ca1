"""CLI entrypoints for docbuild commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from .config import ConfigError, CoreConfig, load_config
from .logging import configure_logging
from .models import Project
from .stage import run_parse_project


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docbuild",
        description="Parse a documentation project folder into a project model.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write DEBUG-level logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse",
        help="Collect metadata, images, tokens, descriptions and navigation.",
    )
    _add_verbose_option(parse_parser, suppress_default=True)
    parse_parser.add_argument(
        "input_file",
        help="Project input file; a .sdnav file enables navigation mode.",
    )
    parse_parser.add_argument(
        "--config",
        default=None,
        help="Path to a .docbuild.yml file or its directory (defaults to the input file's folder).",
    )
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary as JSON.",
    )
    return parser


def _resolve_config(input_file: str, config_path: str | None) -> CoreConfig:
    source = Path(config_path) if config_path else Path(input_file).expanduser().parent
    config = load_config(source)
    config.input_file = input_file
    return config


def _summarize(project: Project) -> Dict[str, Any]:
    return {
        "project_name": project.project_name,
        "version_number": project.version_number,
        "images": len(project.images),
        "tokens": len(project.tokens),
        "descriptions": sorted(project.description),
        "documentation_languages": sorted(project.documentation_languages),
        "repositories": list(project.repositories),
        "navigation_entries": sum(
            1 for repository in project.repositories.values() for _ in repository.iter_navigation()
        ),
    }


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docbuild commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "parse":
        try:
            config = _resolve_config(args.input_file, args.config)
            project = run_parse_project(config)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        except Exception as exc:
            parser.exit(1, f"docbuild parse failed: {exc}\nRun with --verbose for more details.\n")
        summary = _summarize(project)
        if args.json:
            print(json.dumps(summary, indent=2))
        else:
            print(f"Project: {summary['project_name'] or '(unnamed)'}")
            print(f"Images: {summary['images']}")
            print(f"Tokens: {summary['tokens']}")
            print(f"Descriptions: {', '.join(summary['descriptions']) or '(none)'}")
            print(f"Languages: {', '.join(summary['documentation_languages']) or '(none)'}")
            print(f"Navigation entries: {summary['navigation_entries']}")
            for key in summary["repositories"]:
                print(f"Repository: {_relativize(Path(key))}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
