"""
Services package - Business logic layer.

Contains:
- Registry import (file -> validated records)
- Registry queries, merge and export
- Seat assignment and table layout
- Table averages
- Mock session data
"""

from src.services.registry_import import RegistryImportService, RegistryImportError, ImportResult
from src.services.seating import assign_seat, resize_tables, seat_layout, normalize_seat_name
from src.services.table_stats import table_averages, TableAverages

__all__ = [
    'RegistryImportService',
    'RegistryImportError',
    'ImportResult',
    'assign_seat',
    'resize_tables',
    'seat_layout',
    'normalize_seat_name',
    'table_averages',
    'TableAverages',
]
