"""
Registry Import Service

Turns an uploaded player database file into validated PlayerStats records.
The service never touches application state: it either returns a typed
ImportResult for the caller to merge, or raises RegistryImportError and
leaves the registry exactly as it was.

Accepted file shapes:
1. A JSON array of records, each carrying a "Player" name
2. A JSON object mapping lowercase player name -> record
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from src.logging import get_logger
from src.models import PlayerStats


class RegistryImportError(ValueError):
    """Raised when an import file cannot be decoded or validated."""
    pass


@dataclass
class ImportResult:
    """
    Result of parsing one import file.

    Attributes:
        players: Validated records keyed by lowercased player name
        shape: "array" or "mapping"
        partial: Keys of records accepted with missing stats (lenient mode only)
    """
    players: Dict[str, PlayerStats]
    shape: str
    partial: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.players)

    def __str__(self) -> str:
        return f"Loaded {self.count} players successfully."


class RegistryImportService:
    """
    Parses and validates player database files.

    Usage:
        service = RegistryImportService(strict=True)
        try:
            result = service.parse(uploaded_bytes)
        except RegistryImportError as e:
            ...  # show the error, registry unchanged
        store.dispatch(merge_players, result.players)
    """

    def __init__(self, strict: bool = True):
        """
        Args:
            strict: Reject records missing any recognized stat field.
                    When False, partial records are accepted as-is.
        """
        self.strict = strict
        self.logger = get_logger()

    def parse(self, raw: Union[bytes, str], filename: str = "") -> ImportResult:
        """
        Decode, validate and re-key an import file.

        Args:
            raw: File contents (bytes are decoded as UTF-8)
            filename: Only used in log messages

        Returns:
            ImportResult with validated records

        Raises:
            RegistryImportError: On decode errors, wrong shape or invalid records
        """
        try:
            data = json.loads(self._decode(raw))
            if isinstance(data, list):
                result = ImportResult(players=self._from_array(data), shape="array")
            elif isinstance(data, dict):
                result = ImportResult(players=self._from_mapping(data), shape="mapping")
            else:
                raise RegistryImportError(
                    f"Expected a JSON array or object, got {type(data).__name__}"
                )
            result.partial = self._check_completeness(result.players)
        except RegistryImportError as e:
            self.logger.import_rejected(str(e), filename)
            raise
        except json.JSONDecodeError as e:
            self.logger.import_rejected(f"invalid JSON: {e}", filename)
            raise RegistryImportError(f"Invalid JSON: {e}") from e

        self.logger.registry_imported(result, filename)
        return result

    @staticmethod
    def _decode(raw: Union[bytes, str]) -> str:
        if isinstance(raw, str):
            return raw
        try:
            # utf-8-sig tolerates a leading byte order mark
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise RegistryImportError(f"File is not valid UTF-8 text: {e}") from e

    def _from_array(self, items: List[Any]) -> Dict[str, PlayerStats]:
        players: Dict[str, PlayerStats] = {}
        for index, item in enumerate(items):
            if not isinstance(item, dict):
                raise RegistryImportError(
                    f"Record #{index + 1} is a {type(item).__name__}, expected an object"
                )
            if "Player" not in item:
                raise RegistryImportError(f"Record #{index + 1} has no 'Player' field")
            stats = self._validate(item, label=f"Record #{index + 1}")
            # Later duplicates win
            players[stats.key] = stats
        return players

    def _from_mapping(self, mapping: Dict[str, Any]) -> Dict[str, PlayerStats]:
        players: Dict[str, PlayerStats] = {}
        for key, item in mapping.items():
            if not isinstance(item, dict):
                raise RegistryImportError(
                    f"Entry '{key}' is a {type(item).__name__}, expected an object"
                )
            record = dict(item)
            record.setdefault("Player", key)
            stats = self._validate(record, label=f"Entry '{key}'")
            players[key.strip().lower()] = stats
        return players

    @staticmethod
    def _validate(record: Dict[str, Any], label: str) -> PlayerStats:
        try:
            return PlayerStats.model_validate(record)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                for err in e.errors()
            )
            raise RegistryImportError(f"{label} is invalid ({problems})") from e

    def _check_completeness(self, players: Dict[str, PlayerStats]) -> List[str]:
        partial = [key for key, stats in players.items() if not stats.is_complete]
        if partial and self.strict:
            first = players[partial[0]]
            raise RegistryImportError(
                f"{len(partial)} record(s) are missing stats, e.g. '{first.player}' "
                f"has no {', '.join(first.missing_stats())}"
            )
        return partial
