"""Reviewer workload aggregation, badge classification and the analysis pipeline."""

from .aggregation import aggregate_reviewers, filter_scope, normalize_status
from .badges import BadgePicker, classify_badges
from .core import ReviewerStatsAnalyzer

__all__ = [
    'aggregate_reviewers',
    'filter_scope',
    'normalize_status',
    'BadgePicker',
    'classify_badges',
    'ReviewerStatsAnalyzer',
]
