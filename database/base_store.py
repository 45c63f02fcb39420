from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence
import pandas as pd
from core.models import Listing


class StorageError(RuntimeError):
    """Any failure talking to the tabular store (missing sheet, schema mismatch, API error)."""


class BaseStore(ABC):
    """
    Spreadsheet-like store addressed by a sheet name plus A1 ranges.
    Implementations raise StorageError; callers decide how to degrade.
    """

    @abstractmethod
    def read_all(self, sheet: str, column_types: Dict[str, str]) -> pd.DataFrame:
        ...

    @abstractmethod
    def append_at(self, sheet: str, start_address: str, listings: Sequence[Listing], include_headers: bool) -> None:
        ...

    @abstractmethod
    def append(self, sheet: str, listings: Sequence[Listing]) -> None:
        """Add rows after the last row the store itself finds in the sheet."""
        ...

    @abstractmethod
    def clear_range(self, sheet: str, address_range: str) -> None:
        ...


def _as_text(v: Any):
    if v is None or (not isinstance(v, str) and pd.isna(v)):
        return None
    value = str(v)
    return value if value != "" else None


def empty_frame(column_types: Dict[str, str]) -> pd.DataFrame:
    return coerce_columns(pd.DataFrame(columns=list(column_types)), column_types)


def coerce_columns(frame: pd.DataFrame, column_types: Dict[str, str]) -> pd.DataFrame:
    """
    Force the stored columns into their declared types.
    A declared column missing from the frame is a schema mismatch.
    """
    missing = [c for c in column_types if c not in frame.columns]
    if missing:
        raise StorageError(f"Missing columns: {', '.join(missing)}")

    out = frame.copy()
    for column, kind in column_types.items():
        if kind == "text":
            # explicit object dtype, string inference would turn None into NaN
            out[column] = pd.Series([_as_text(v) for v in out[column]], index=out.index, dtype=object)
        elif kind == "date":
            out[column] = pd.to_datetime(out[column], errors="coerce").dt.date
        elif kind == "integer":
            out[column] = pd.to_numeric(out[column], errors="coerce").astype("Int64")
        else:
            raise StorageError(f"Unknown column type '{kind}' for column '{column}'")
    return out[list(column_types)]


def records_to_frame(records: List[Dict[str, Any]], column_types: Dict[str, str]) -> pd.DataFrame:
    if not records:
        return empty_frame(column_types)
    return coerce_columns(pd.DataFrame.from_records(records), column_types)
