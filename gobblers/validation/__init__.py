from .graph_checks import GraphIntegrityError, require_record, validate_records

__all__ = ["GraphIntegrityError", "require_record", "validate_records"]
