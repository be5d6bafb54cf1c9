import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from rich import traceback
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich_argparse import RichHelpFormatter

from funcaptcha import (
    DEFAULT_TABLE,
    Args,
    FlowNotFoundError,
    FlowTable,
    InvalidConfigError,
    OutputFormat,
)

logger = logging.getLogger(__name__)
traceback.install(show_locals=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A tool for inspecting the default FunCaptcha keys of Roblox flows",
        formatter_class=RichHelpFormatter,
    )

    parser.add_argument(
        "flows",
        nargs="*",
        default=[],
        type=str,
        help="The flows to show, by default all of them",
        metavar="FLOW",
    )

    parser.add_argument(
        "-c",
        "--config",
        default=None,
        type=str,
        help="A TOML file with flow overrides to apply to the defaults",
    )

    parser.add_argument(
        "-f",
        "--format",
        default=OutputFormat.TABLE,
        type=lambda output_format: OutputFormat(output_format.lower()),
        help="The output format",
        choices=list(OutputFormat),
        dest="output_format",
    )

    field_group = parser.add_mutually_exclusive_group()

    field_group.add_argument(
        "-k",
        "--keys-only",
        action="store_true",
        help="Only show the public keys",
    )

    field_group.add_argument(
        "-p",
        "--presets-only",
        action="store_true",
        help="Only show the presets",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug messages",
    )

    return parser


def render_table(rows: Dict[str, Dict[str, str]], args: Args) -> Table:
    table = Table(title="FunCaptcha flows")
    table.add_column("Flow", style="cyan", no_wrap=True)

    if not args.presets_only:
        table.add_column("Public key", no_wrap=True)

    if not args.keys_only:
        table.add_column("Preset", style="green", no_wrap=True)

    for flow, fields in rows.items():
        table.add_row(flow, *fields.values())

    return table


def main(argv: Optional[List[str]] = None) -> int:
    args = Args.from_namespace(build_parser().parse_args(argv))

    logging.basicConfig(
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    # basicConfig leaves the level alone when handlers already exist.
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.INFO)

    flow_table: FlowTable = DEFAULT_TABLE

    if args.config is not None:
        try:
            flow_table = FlowTable.from_toml(args.config)
        except InvalidConfigError as err:
            logger.error(err)
            return 1

        logger.info("Applied flow overrides from %s", args.config)

    rows: Dict[str, Dict[str, str]] = {}
    missing_flows: List[str] = []

    for flow in args.flows or flow_table.flows:
        try:
            config = flow_table.get_config(flow)
        except FlowNotFoundError as err:
            logger.error(err)
            missing_flows.append(flow)
            continue

        fields = config.model_dump()

        if args.keys_only:
            fields.pop("preset")
        elif args.presets_only:
            fields.pop("public_key")

        rows[flow] = fields

    console = Console()

    if args.output_format is OutputFormat.JSON:
        data: Dict[str, Any] = {
            flow: next(iter(fields.values())) if len(fields) == 1 else fields
            for flow, fields in rows.items()
        }

        console.print_json(data=data)
    elif rows:
        console.print(render_table(rows, args))

    if missing_flows:
        logger.warning("Known flows: %s", ", ".join(flow_table.flows))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
