from .errors import ValidationError, ValidationIssue
from .record_validation import parse_records, validate_collection

__all__ = ["ValidationError", "ValidationIssue", "parse_records", "validate_collection"]
