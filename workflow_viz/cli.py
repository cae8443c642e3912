#!/usr/bin/env python3
"""CLI script to render a workflow file.

Usage:
    workflow-viz <workflow.json>

    # SVG with a layered layout, written to a file
    workflow-viz <workflow.json> --format svg --layout --output workflow.svg

    # graph data as JSON, rejecting malformed workflows
    workflow-viz <workflow.json> --format json --strict
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from workflow_viz.config import Settings, get_settings
from workflow_viz.graph.builder import build_graph
from workflow_viz.graph.validation import GraphValidationError
from workflow_viz.log import configure_logging
from workflow_viz.models.graph_data import GraphData
from workflow_viz.models.workflow import Workflow
from workflow_viz.render.dot import render_dot
from workflow_viz.render.summary import format_graph_summary
from workflow_viz.render.svg import render_svg

logger = logging.getLogger(__name__)

FORMATS = ("dot", "svg", "json", "summary")


def load_workflow(workflow_file: Path) -> Workflow:
    """Load a workflow from a JSON file.

    Args:
        workflow_file: path to the workflow JSON file

    Returns:
        the validated Workflow
    """
    with open(workflow_file, encoding="utf-8") as f:
        data = json.load(f)
    return Workflow.model_validate(data)


def render(data: GraphData, fmt: str, args: argparse.Namespace) -> str:
    """Render graph data in the requested output format."""
    if fmt == "svg":
        return render_svg(
            data,
            width=args.width,
            height=args.height,
            layout=args.layout,
            strict=args.strict,
        )
    if fmt == "json":
        return json.dumps(data.to_dict(), indent=2) + "\n"
    if fmt == "summary":
        return format_graph_summary(data) + "\n"
    return render_dot(data, strict=args.strict)


def positive_int(value: str) -> int:
    """argparse type for canvas sizes."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return number


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-viz",
        description="Render a workflow as a DOT graph, an SVG document or a summary.",
    )
    parser.add_argument(
        "workflow_file",
        type=Path,
        help="path to the workflow JSON file",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=settings.default_format,
        help=f"output format (default: {settings.default_format})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="write output to this file instead of stdout",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=settings.strict,
        help="reject duplicate ids, unknown dependencies and cycles",
    )
    parser.add_argument(
        "--width",
        type=positive_int,
        default=settings.svg_width,
        help="SVG canvas width",
    )
    parser.add_argument(
        "--height",
        type=positive_int,
        default=settings.svg_height,
        help="SVG canvas height",
    )
    parser.add_argument(
        "--layout",
        action="store_true",
        help="place SVG nodes with a layered layout instead of at the origin",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    args = build_parser(settings).parse_args(argv)
    configure_logging(settings.log_level)

    if not args.workflow_file.exists():
        print(f"Error: workflow file not found: {args.workflow_file}", file=sys.stderr)
        return 1

    try:
        workflow = load_workflow(args.workflow_file)
        data = build_graph(workflow, strict=args.strict)
        output = render(data, args.format, args)
    except json.JSONDecodeError as exc:
        print(f"Error: invalid JSON in {args.workflow_file}: {exc}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"Error: invalid workflow file {args.workflow_file}: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"Error: invalid workflow: {exc}", file=sys.stderr)
        return 1
    except GraphValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: cannot read {args.workflow_file}: {exc}", file=sys.stderr)
        return 1

    if args.output:
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot write {args.output}: {exc}", file=sys.stderr)
            return 1
        logger.info("wrote %s output to %s", args.format, args.output)
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
