"""Issue and result types shared by the validators."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """How serious a validation issue is."""

    ERROR = "error"  # an invariant of the topology is broken
    WARNING = "warning"  # legal, but probably unfinished
    INFO = "info"


@dataclass
class ValidationIssue:
    """One problem found in a project."""

    code: str
    message: str
    severity: Severity
    element_id: int | None = None
    line: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        where = []
        if self.element_id is not None:
            where.append(f"#{self.element_id}")
        if self.line:
            where.append(f"in {self.line}" if where else self.line)
        location = f" [{' '.join(where)}]" if where else ""
        return f"{self.severity.value.upper()}: {self.code}{location} - {self.message}"


@dataclass
class ValidationResult:
    """Issues collected by one or more validators."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def _by_severity(self, severity: Severity) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self._by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self._by_severity(Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def is_valid(self) -> bool:
        """True when no error-level issue was found. Warnings are allowed."""
        return not self.has_errors

    def codes(self) -> set[str]:
        """Distinct issue codes, handy for assertions."""
        return {i.code for i in self.issues}

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        element_id: int | None = None,
        line: str | None = None,
        **details: Any,
    ) -> None:
        """Record an issue."""
        self.issues.append(
            ValidationIssue(code, message, severity, element_id, line, details)
        )

    def add_error(self, code: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, code, message, **kwargs)

    def add_warning(self, code: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, code, message, **kwargs)

    def merge(self, other: "ValidationResult") -> None:
        """Append the issues of another result to this one."""
        self.issues.extend(other.issues)
