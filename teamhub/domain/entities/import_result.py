"""Domain objects describing the outcome of a CSV import."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RowError:
    """Failure of one CSV row; ``row`` counts the header as row 1."""

    row: int
    reason: str


@dataclass
class ImportResult:
    successful: int = 0
    failed: int = 0
    errors: list[RowError] = field(default_factory=list)


__all__ = ["ImportResult", "RowError"]
