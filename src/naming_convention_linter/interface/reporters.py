"""Protocol for audit reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from naming_convention_linter.domain.entities import AuditResult


class AuditReporter(Protocol):
    """Protocol for reporting audit results."""

    def report_audit(self, audit_result: "AuditResult", view: str = "by_file") -> None:
        """Report audit results to the user. view: 'by_file' (default) or 'by_code'."""
        ...
