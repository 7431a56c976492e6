"""CSV import use cases."""

from .batch import read_csv_rows, run_row_import
from .csv_templates import member_csv_template, project_csv_template, task_csv_template
from .members import import_members_from_csv
from .projects import import_projects_from_csv
from .tasks import import_tasks_from_csv

__all__ = [
    "import_members_from_csv",
    "import_projects_from_csv",
    "import_tasks_from_csv",
    "member_csv_template",
    "project_csv_template",
    "read_csv_rows",
    "run_row_import",
]
