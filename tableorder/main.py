"""Entry point for the table-order Textual apps."""

from __future__ import annotations

import argparse

from tableorder.config import DEFAULT_TABLE_ID
from tableorder.table_order_app import OrderAdminApp, TableOrderApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="table-order", description="Restaurant table ordering terminal.")
    parser.add_argument("table_id", nargs="?", default=DEFAULT_TABLE_ID, help="table the ordering session belongs to")
    parser.add_argument("--admin", action="store_true", help="open order management instead of the ordering screen")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the ordering app, or the order management app with --admin."""
    args = build_parser().parse_args(argv)
    if args.admin:
        OrderAdminApp().run()
        return
    TableOrderApp(table_id=args.table_id).run()


if __name__ == "__main__":
    main()
