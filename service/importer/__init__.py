"""Fribbels 익스포트 임포트"""

from .import_service import ImportResult, ImportService, ItemOutcome, parse_export_bytes

__all__ = [
    "ImportResult",
    "ImportService",
    "ItemOutcome",
    "parse_export_bytes",
]
