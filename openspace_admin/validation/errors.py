from __future__ import annotations

from dataclasses import dataclass

from openspace_admin.core.exceptions import RecordSchemaError


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str


class ValidationError(RecordSchemaError):
    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in issues))
