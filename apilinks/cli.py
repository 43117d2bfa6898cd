"""Command-line access to the link builders."""

import argparse
import logging
from pathlib import Path

from apilinks.entity import Entity
from apilinks.link_renderer import EMITTERS, LinkRenderer, build_renderer
from apilinks.load_config import load_config
from apilinks.load_model import load_model
from apilinks.registry import Registry


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="apilinks",
        description="Resolve API type and member references to links.",
    )
    ap.add_argument(
        "--model",
        type=Path,
        help="YAML file describing the documented types",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "--format",
        choices=sorted(EMITTERS),
        help="Link markup to emit (default: from config, html)",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")

    sub = ap.add_subparsers(dest="command", required=True)

    type_cmd = sub.add_parser("type", help="Link one type or a union of types")
    type_cmd.add_argument("tokens", nargs="+", help="Type references, e.g. int[] Foo")
    type_cmd.add_argument("--context", help="Name of the type being documented")
    type_cmd.add_argument("--title", help="Link text override")

    ret_cmd = sub.add_parser("return-type", help="Link a method's return types")
    ret_cmd.add_argument("entity", help="Name of the type being documented")
    ret_cmd.add_argument("method", help="Method name")

    subj_cmd = sub.add_parser("subject", help="Link a member of a type")
    subj_cmd.add_argument("entity", help="Name of the type owning the member")
    subj_cmd.add_argument("member", help="Member name")
    subj_cmd.add_argument("--title", help="Link text override")

    guide_cmd = sub.add_parser("guide", help="URL of a guide page")
    guide_cmd.add_argument("file", help="Guide file, e.g. intro/start.md#setup")
    return ap


def _lookup_or_exit(registry: Registry, name: str) -> Entity:
    entity = registry.lookup(name)
    if entity is None:
        msg = f"Unknown type: {name}"
        raise SystemExit(msg)
    return entity


def run(args: argparse.Namespace, renderer: LinkRenderer) -> str:
    """Execute the selected command and return its output."""
    registry = renderer.registry
    if args.command == "type":
        context = registry.lookup(args.context) if args.context else None
        return renderer.create_type_link(args.tokens, context, args.title)
    if args.command == "return-type":
        entity = _lookup_or_exit(registry, args.entity)
        method = entity.members.get(args.method)
        if method is None or not method.is_method:
            msg = f"{entity.name} has no method {args.method}"
            raise SystemExit(msg)
        return renderer.create_method_return_type_link(method, entity)
    if args.command == "subject":
        entity = _lookup_or_exit(registry, args.entity)
        member = entity.members.get(args.member)
        if member is None:
            msg = f"{entity.name} has no member {args.member}"
            raise SystemExit(msg)
        return renderer.create_subject_link(member, args.title)
    return renderer.generate_guide_url(args.file)


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface."""
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(message)s")

    config = load_config(args.config)
    if args.format:
        config["output"]["format"] = args.format

    try:
        registry = load_model(args.model) if args.model else Registry()
        renderer = build_renderer(config, registry)
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(str(e)) from e

    print(run(args, renderer))
    return 0
