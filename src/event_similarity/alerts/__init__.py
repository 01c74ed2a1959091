"""User-facing messages and audit records derived from a duplicate check."""

from event_similarity.alerts.check_log import SimilarityCheckLog, build_check_log
from event_similarity.alerts.formatter import Alert, format_alert, warning_message

__all__ = [
    "Alert",
    "build_check_log",
    "format_alert",
    "SimilarityCheckLog",
    "warning_message",
]
