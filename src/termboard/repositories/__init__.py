"""Repository layer for board persistence."""

from .csv_codec import CSV_HEADER, export_csv, import_csv, read_csv, write_csv
from .json_store import JsonBoardRepository
from .protocol import BoardRepositoryProtocol

__all__ = [
    "CSV_HEADER",
    "BoardRepositoryProtocol",
    "JsonBoardRepository",
    "export_csv",
    "import_csv",
    "read_csv",
    "write_csv",
]
