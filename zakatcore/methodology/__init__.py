"""Zakat methodology documents: schema, validation and registry."""
from dataclasses import dataclass, field

from .schema import MethodologyPolicy


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a candidate methodology document."""
    policy: MethodologyPolicy
    errors: list[str] = field(default_factory=list)
    used_fallback: bool = False

    @property
    def is_valid(self) -> bool:
        return not self.errors


class MethodologyError(Exception):
    """Base exception for methodology errors."""
    pass


class MethodologyValidationError(MethodologyError, ValueError):
    """Candidate document failed schema or range checks."""

    def __init__(self, errors: list[str], methodology_id: str | None = None):
        self.errors = list(errors)
        self.methodology_id = methodology_id
        label = methodology_id or 'methodology'
        super().__init__(f"Invalid {label}: {'; '.join(self.errors)}")


class UnknownMethodologyError(MethodologyError, KeyError):
    """No methodology registered under the requested identifier."""

    def __init__(self, methodology_id: str):
        self.methodology_id = methodology_id
        super().__init__(methodology_id)

    def __str__(self) -> str:
        return f'Unknown methodology: {self.methodology_id}'


class DuplicateMethodologyError(MethodologyError, ValueError):
    """A methodology is already registered under this identifier."""
    pass
