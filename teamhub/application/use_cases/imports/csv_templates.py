"""Sample CSV files offered for download before an import."""

from __future__ import annotations

from collections.abc import Sequence

from .batch import _get_pandas_module
from .members import MEMBER_CSV_COLUMNS
from .projects import PROJECT_CSV_COLUMNS
from .tasks import TASK_CSV_COLUMNS

_PROJECT_EXAMPLE = (
    "New Marketing Campaign",
    "Launch new product line",
    "team-uuid-456",
    "planning",
    "2024-10-01",
    "2025-03-31",
)
_TASK_EXAMPLE = (
    "My New Task",
    "Detailed description here",
    "project-uuid-123",
    "member@example.com",
    "2024-12-31",
    "high",
    "todo",
)
_MEMBER_EXAMPLES = (("member1@example.com",), ("member2@example.com",))


def _render(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    pd = _get_pandas_module()
    dataframe = pd.DataFrame([list(row) for row in rows], columns=list(header))
    return dataframe.to_csv(index=False)


def project_csv_template() -> str:
    return _render(PROJECT_CSV_COLUMNS, [_PROJECT_EXAMPLE])


def task_csv_template() -> str:
    return _render(TASK_CSV_COLUMNS, [_TASK_EXAMPLE])


def member_csv_template() -> str:
    return _render(MEMBER_CSV_COLUMNS, _MEMBER_EXAMPLES)


__all__ = ["member_csv_template", "project_csv_template", "task_csv_template"]
