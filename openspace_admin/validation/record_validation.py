from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.validation.errors import ValidationIssue, ValidationError


def parse_records(raw_items: Iterable[Any], profile: EntityProfile) -> List[Any]:
    """
    Build typed records from raw dicts, collecting every problem before raising.

    :raises ValidationError: if any item is malformed or ids are not unique
    """
    issues: list[ValidationIssue] = []
    records: List[Any] = []

    for idx, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            issues.append(ValidationIssue("RECORD_NOT_OBJECT", f"item {idx} is {type(raw).__name__}, expected an object."))
            continue
        try:
            records.append(profile.parse_record(raw))
        except KeyError as e:
            issues.append(ValidationIssue("RECORD_MISSING_FIELD", f"item {idx} is missing field {e}."))
        except (TypeError, ValueError) as e:
            issues.append(ValidationIssue("RECORD_BAD_VALUE", f"item {idx}: {e}"))

    issues.extend(_duplicate_id_issues(records))

    if issues:
        raise ValidationError(issues)
    return records


def validate_collection(records: Sequence[Any]) -> None:
    issues = _duplicate_id_issues(records)
    if issues:
        raise ValidationError(issues)


def _duplicate_id_issues(records: Sequence[Any]) -> list[ValidationIssue]:
    seen = set()
    dupes = []
    for r in records:
        if r.id in seen and r.id not in dupes:
            dupes.append(r.id)
        seen.add(r.id)
    return [ValidationIssue("RECORD_DUPLICATE_ID", f"id {d!r} appears more than once.") for d in dupes]
