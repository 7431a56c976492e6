"""Row-by-row CSV import with one transaction per row."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from functools import lru_cache
from io import BytesIO
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from teamhub.domain.entities import ImportResult, RowError
from teamhub.domain.errors import DuplicateRowError, RowImportError

logger = logging.getLogger(__name__)

CsvRow = Mapping[str, str]
RowHandler = Callable[[Session, CsvRow], None]
RowValidator = Callable[[CsvRow], str | None]

# The header occupies line 1, so the first data row is reported as row 2.
_FIRST_DATA_ROW = 2


@lru_cache(maxsize=1)
def _get_pandas_module() -> Any:
    """Load :mod:`pandas` lazily to keep application start-up light."""

    return importlib.import_module("pandas")


def read_csv_rows(content: bytes) -> list[dict[str, str]]:
    """Parse ``content`` into a list of ``{column: value}`` dictionaries.

    Every value is read as text; blank cells become empty strings and
    surrounding whitespace is stripped from headers and values.
    """

    if not content or not content.strip():
        return []

    pd = _get_pandas_module()
    try:
        frame = pd.read_csv(
            BytesIO(content),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except UnicodeDecodeError as exc:
        raise ValueError("The CSV file must be UTF-8 encoded") from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise ValueError(f"The CSV file could not be parsed: {exc}") from exc

    frame.columns = [str(column).strip() for column in frame.columns]
    frame = frame.fillna("")
    return [
        {column: str(value).strip() for column, value in record.items()}
        for record in frame.to_dict(orient="records")
    ]


def run_row_import(
    session: Session,
    rows: Sequence[CsvRow],
    handler: RowHandler,
    *,
    validate: RowValidator | None = None,
) -> ImportResult:
    """Run ``handler`` for each row, committing rows independently.

    ``validate`` returns a reason when a row lacks required data; such rows
    are recorded as failed without touching the database. A row whose
    handler raises is rolled back on its own and recorded as an error before
    the import moves on to the next row.
    """

    result = ImportResult()
    for index, row in enumerate(rows):
        row_number = index + _FIRST_DATA_ROW

        if validate is not None:
            reason = validate(row)
            if reason:
                result.failed += 1
                result.errors.append(RowError(row=row_number, reason=reason))
                continue

        try:
            handler(session, row)
            session.commit()
        except DuplicateRowError:
            session.rollback()
            result.failed += 1
        except RowImportError as exc:
            session.rollback()
            result.failed += 1
            result.errors.append(RowError(row=row_number, reason=str(exc)))
        except SQLAlchemyError as exc:
            session.rollback()
            logger.warning("CSV row %s rolled back: %s", row_number, exc)
            result.failed += 1
            reason = str(getattr(exc, "orig", None) or exc)
            result.errors.append(RowError(row=row_number, reason=reason))
        except Exception as exc:
            session.rollback()
            logger.exception("CSV row %s failed", row_number)
            result.failed += 1
            result.errors.append(RowError(row=row_number, reason=str(exc)))
        else:
            result.successful += 1

    logger.info(
        "CSV import finished: %d successful, %d failed",
        result.successful,
        result.failed,
    )
    return result


def parse_optional_date(value: str | None, *, field: str) -> date | None:
    """Return ``value`` as a date, or ``None`` when the cell is blank."""

    if not value:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise RowImportError(f"Invalid {field} '{value}'. Use YYYY-MM-DD.") from exc


__all__ = [
    "CsvRow",
    "RowHandler",
    "parse_optional_date",
    "read_csv_rows",
    "run_row_import",
]
