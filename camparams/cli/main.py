"""Command line tool for inspecting and editing flattened camera parameters.

Examples::

    camparams dump "preview-size=640x480;preview-format=yuv420sp"
    camparams get "preview-size-values=800x600,480x320" preview-size-values --type sizes
    camparams set "zoom=3" zoom=4 zoom-supported=true
    camparams remove "zoom=3;zoom-supported=true" zoom
    echo "iso=100;zoom=3" | camparams profile --filter -
    camparams profile --config profile.txt --enable sony --disable qcom
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Optional, Sequence

from camparams.core.logging_utils import get_module_logger
from camparams.core.paths import PROFILE_PATH
from camparams.params import values as codec
from camparams.params.errors import CameraParametersError
from camparams.params.features import FeatureProfile
from camparams.params.parameter_map import ParameterMap

from .common import (
    add_common_cli_arguments,
    add_config_argument,
    key_value,
    read_flattened,
    setup_logging_from_args,
)

logger = get_module_logger("CLI")


def _render_size(params: ParameterMap, key: str) -> str:
    size = codec.parse_size(params.get(key))
    return codec.format_size(size) if size is not None else "-1x-1"


def _render_range(params: ParameterMap, key: str) -> str:
    fps_range = codec.parse_range(params.get(key))
    return codec.format_range(fps_range) if fps_range is not None else "-1,-1"


VALUE_RENDERERS: Dict[str, Callable[[ParameterMap, str], str]] = {
    "str": lambda params, key: params.get(key) or "",
    "int": lambda params, key: str(params.get_int(key)),
    "float": lambda params, key: repr(params.get_float(key)),
    "size": _render_size,
    "sizes": lambda params, key: codec.format_size_list(codec.parse_size_list(params.get(key))),
    "range": _render_range,
    "ranges": lambda params, key: codec.format_range_list(codec.parse_range_list(params.get(key))),
    "areas": lambda params, key: codec.format_area_list(codec.parse_area_list(params.get(key))),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="camparams",
        description="Inspect and edit flattened camera parameter strings",
    )
    add_common_cli_arguments(parser)

    sub = parser.add_subparsers(dest="command", required=True)

    dump = sub.add_parser("dump", help="List every key and value")
    dump.add_argument("text", nargs="?", default=None, help="Flattened parameters ('-' or omitted: stdin)")

    get = sub.add_parser("get", help="Print one value")
    get.add_argument("text", help="Flattened parameters ('-' for stdin)")
    get.add_argument("key")
    get.add_argument("--type", choices=sorted(VALUE_RENDERERS), default="str", dest="value_type")

    set_cmd = sub.add_parser("set", help="Set values and print the new flattened string")
    set_cmd.add_argument("text", help="Flattened parameters ('-' for stdin)")
    set_cmd.add_argument("pairs", nargs="+", type=key_value, metavar="KEY=VALUE")

    remove = sub.add_parser("remove", help="Remove keys and print the new flattened string")
    remove.add_argument("text", help="Flattened parameters ('-' for stdin)")
    remove.add_argument("keys", nargs="+", metavar="KEY")

    profile = sub.add_parser("profile", help="Show or change active feature groups")
    add_config_argument(profile)
    profile.add_argument(
        "--enable",
        action="append",
        default=[],
        metavar="GROUP",
        help="Activate a feature group and save the profile (repeatable)",
    )
    profile.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="GROUP",
        help="Deactivate a feature group and save the profile (repeatable)",
    )
    profile.add_argument(
        "--filter",
        dest="filter_text",
        default=None,
        help="Flattened parameters to strip of keys from inactive groups ('-' for stdin)",
    )

    return parser


def _cmd_dump(args: argparse.Namespace) -> int:
    params = ParameterMap.from_flattened(read_flattened(args.text))
    params.dump(sys.stdout)
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    params = ParameterMap.from_flattened(read_flattened(args.text))
    if args.key not in params:
        print(f"Key not found: {args.key}", file=sys.stderr)
        return 1
    print(VALUE_RENDERERS[args.value_type](params, args.key))
    return 0


def _cmd_set(args: argparse.Namespace) -> int:
    params = ParameterMap.from_flattened(read_flattened(args.text))
    for key, value in args.pairs:
        params.set(key, value)
    print(params.flatten())
    return 0


def _cmd_remove(args: argparse.Namespace) -> int:
    params = ParameterMap.from_flattened(read_flattened(args.text))
    for key in args.keys:
        params.remove(key)
    print(params.flatten())
    return 0


def _cmd_profile(args: argparse.Namespace) -> int:
    profile = FeatureProfile.load(args.config)
    if args.enable or args.disable:
        profile = profile.with_groups(args.enable, args.disable)
        if not profile.save(args.config):
            print(f"Error: could not write profile {args.config or PROFILE_PATH}", file=sys.stderr)
            return 1
        logger.info("Saved feature groups: %s", ", ".join(sorted(profile.active_groups)) or "none")
    if args.filter_text is not None:
        params = ParameterMap.from_flattened(read_flattened(args.filter_text))
        print(profile.filter(params).flatten())
        return 0
    for group in sorted(profile.active_groups):
        print(group)
    return 0


COMMANDS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "dump": _cmd_dump,
    "get": _cmd_get,
    "set": _cmd_set,
    "remove": _cmd_remove,
    "profile": _cmd_profile,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging_from_args(args)

    try:
        return COMMANDS[args.command](args)
    except CameraParametersError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


__all__ = ["build_parser", "main"]
