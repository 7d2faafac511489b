"""Structured validation error model for config and query validation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """A single validation error with stable code and location context.

    For query errors *path* is the query source (a file name or ``<query>``)
    and *field* names the offending predicate. Config errors use the config
    file path and the dotted key.
    """

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    pattern_index: int | None = None

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = self.path
        if self.pattern_index is not None:
            location = f"{location}#pattern{self.pattern_index}"
        parts = [f"[{self.code}]", location]
        if self.field:
            parts.append(f"{self.field}:")
        parts.append(self.message)
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by code, path, pattern, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.pattern_index or 0, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    sorted_errs = sort_errors(errors)
    return "\n".join(e.format() for e in sorted_errs)
