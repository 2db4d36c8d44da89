"""Main entry point for Structify"""

import argparse
import sys
from typing import List, Optional

from core.enums import PromptStyle, RowFailurePolicy
from core.exceptions import StructifyError
from credentials.cli import key_cli
from functions.sheet import default_gateway, schemify, structify_table
from utils.tables import join_rows, read_table, write_table
from config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Structify - free text to spreadsheet rows",
        epilog="Use 'python main.py key --help' for API key commands"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    structify_parser = subparsers.add_parser(
        "structify", help="Convert free text rows into structured rows"
    )
    structify_parser.add_argument("input", help="Input table (CSV/XLSX): identifier, text")
    structify_parser.add_argument("schema", help="Schema table (CSV/XLSX): keys, descriptions, types")
    structify_parser.add_argument("--output", help="Write rows to this CSV/XLSX file")
    structify_parser.add_argument("--row-separator", default=settings.ROW_SEPARATOR)
    structify_parser.add_argument("--column-separator", default=settings.COLUMN_SEPARATOR)
    policy = structify_parser.add_mutually_exclusive_group()
    policy.add_argument(
        "--lenient",
        dest="policy",
        action="store_const",
        const=RowFailurePolicy.LENIENT,
        help="Emit an empty row for identifiers that fail"
    )
    policy.add_argument(
        "--strict",
        dest="policy",
        action="store_const",
        const=RowFailurePolicy.STRICT,
        help="Abort on the first failing row"
    )
    structify_parser.add_argument(
        "--free-text",
        action="store_true",
        help="Ask for JSON in the prompt instead of constrained decoding"
    )
    structify_parser.add_argument(
        "--no-types",
        action="store_true",
        help="Accept schema tables without a type row"
    )
    structify_parser.add_argument("--model", help="Model name")

    schemify_parser = subparsers.add_parser(
        "schemify", help="Generate a schema table from a description"
    )
    schemify_parser.add_argument("description", help='Description, e.g. "name and age"')
    schemify_parser.add_argument("--output", help="Write the schema table to this CSV/XLSX file")
    schemify_parser.add_argument(
        "--free-text",
        action="store_true",
        help="Ask for JSON in the prompt instead of constrained decoding"
    )
    schemify_parser.add_argument("--model", help="Model name")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    # API key commands
    if argv and argv[0] == "key":
        try:
            key_cli.main(args=argv[1:], prog_name="main.py key")
        except SystemExit as e:
            return e.code or 0
        return 0

    args = build_parser().parse_args(argv)
    style = PromptStyle.FREE_TEXT if args.free_text else None

    try:
        gateway = default_gateway(model=args.model)

        if args.command == "structify":
            rows = structify_table(
                read_table(args.input),
                read_table(args.schema, trim_blank_rows=False),
                gateway=gateway,
                policy=args.policy,
                style=style,
                require_types=False if args.no_types else None
            )
            if args.output:
                write_table(rows, args.output)
                print(f"✓ {len(rows)} rows written to {args.output}")
            else:
                print(join_rows(rows, args.row_separator, args.column_separator))
        else:
            table = schemify(args.description, gateway=gateway, style=style)
            if args.output:
                write_table(table, args.output)
                print(f"✓ Schema written to {args.output}")
            else:
                print(join_rows(table, row_separator="\n"))

        return 0

    except StructifyError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    exit(main())
