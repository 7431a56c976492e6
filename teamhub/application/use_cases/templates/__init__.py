"""Template-related use cases."""

from .create_template import create_template
from .definitions import NewProjectDefinitionData, NewTaskDefinitionData
from .delete_template import delete_template
from .generate_from_template import generate_from_template
from .get_template import get_template
from .list_templates import list_templates
from .update_template import update_template

__all__ = [
    "NewProjectDefinitionData",
    "NewTaskDefinitionData",
    "create_template",
    "delete_template",
    "generate_from_template",
    "get_template",
    "list_templates",
    "update_template",
]
