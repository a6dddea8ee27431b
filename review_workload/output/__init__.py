"""Report output for reviewer workload statistics."""

from .formatter_base import ReportFormatter, sort_reviewers
from .message_templates import wrap_code_block

__all__ = [
    'ReportFormatter',
    'sort_reviewers',
    'wrap_code_block',
]
