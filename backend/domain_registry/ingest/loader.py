# File: domain_registry/ingest/loader.py
import logging
import math
import numbers
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd

from domain_registry.core.exceptions import WorkbookError
from domain_registry.schemas.domain import DomainRecord
from settings import SpreadsheetConfig

logger = logging.getLogger("uvicorn")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is pd.NaT


def to_small_int(value: Any) -> Optional[int]:
    """Whole numbers within the byte range, anything else becomes None."""
    if _is_blank(value) or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, numbers.Real):
        value = float(value)
        if math.isnan(value) or not value.is_integer():
            return None
        number = int(value)
        if SpreadsheetConfig.INTEGER_MIN <= number <= SpreadsheetConfig.INTEGER_MAX:
            return number
    return None


def to_datetime(value: Any) -> Optional[datetime]:
    if _is_blank(value):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, numbers.Real):
        # bare numbers are not dates
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if ts is pd.NaT or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert(None)
    return ts.to_pydatetime()


def to_text(value: Any) -> Optional[str]:
    if _is_blank(value):
        return None
    if isinstance(value, float) and value.is_integer():
        # numeric cells such as filing numbers come back as floats
        value = int(value)
    text = str(value).strip()
    return text or None


class DomainWorkbookLoader:
    """Reads domain rows from the first sheet of an exported .xlsx workbook."""

    def __init__(self):
        self.field_map = SpreadsheetConfig.FIELD_MAP

    def load_file(self, path: str | Path) -> List[DomainRecord]:
        df = self._read_first_sheet(Path(path))
        records = self.to_records(df)
        logger.info(f"📊 Parsed {len(records):,} domain rows from {Path(path).name}")
        return records

    def _read_first_sheet(self, path: Path) -> pd.DataFrame:
        try:
            with pd.ExcelFile(path, engine="openpyxl") as workbook:
                if not workbook.sheet_names:
                    raise WorkbookError("workbook has no sheet")
                sheet_name = workbook.sheet_names[0]
                df = workbook.parse(sheet_name, dtype=object)
        except WorkbookError:
            raise
        except Exception as e:
            raise WorkbookError(f"cannot read workbook {path.name}: {e}") from e

        df.columns = [str(c).strip() for c in df.columns]  # Strip whitespace
        return df

    def to_records(self, df: pd.DataFrame) -> List[DomainRecord]:
        if SpreadsheetConfig.DOMAIN_NAME_HEADER not in df.columns:
            raise WorkbookError(f"missing column '{SpreadsheetConfig.DOMAIN_NAME_HEADER}'")

        duplicated = df.columns[df.columns.duplicated()].unique().tolist()
        if duplicated:
            raise WorkbookError(f"duplicate column(s): {', '.join(duplicated)}")

        # Columns the sheet does not have read as empty
        df = df.reindex(columns=list(self.field_map.keys()))
        df = df.rename(columns=self.field_map)
        df = df.astype(object).where(pd.notna(df), None)

        records = []
        skipped = 0
        for row in df.to_dict(orient="records"):
            record = self._to_record(row)
            if record is None:
                skipped += 1
                continue
            records.append(record)

        if skipped:
            logger.warning(f"⚠️ Skipped {skipped:,} rows without a domain name")
        return records

    def _to_record(self, row: dict) -> Optional[DomainRecord]:
        domain_name = to_text(row.get("domain_name"))
        if domain_name is None:
            return None

        values = {"domain_name": domain_name}
        for field, value in row.items():
            if field == "domain_name":
                continue
            if field in SpreadsheetConfig.INTEGER_FIELDS:
                values[field] = to_small_int(value)
            elif field in SpreadsheetConfig.DATETIME_FIELDS:
                values[field] = to_datetime(value)
            else:
                values[field] = to_text(value)
        return DomainRecord(**values)
