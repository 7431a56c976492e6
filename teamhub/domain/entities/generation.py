"""Value objects exchanged with the template generation use case."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class GenerationParams:
    """Caller supplied input for instantiating a template."""

    team_id: int
    start_date: date | str
    variables: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class GenerationResult:
    success: bool
    message: str
    project_ids: tuple[int, ...] = ()


__all__ = ["GenerationParams", "GenerationResult"]
