"""Utility modules"""

from .log import create_logger
from .tables import read_table, write_table, join_rows, format_cell

__all__ = [
    "create_logger",
    "read_table",
    "write_table",
    "join_rows",
    "format_cell",
]
