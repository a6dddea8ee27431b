"""Reviewer Workload Stats - reviewer assignment statistics for pull requests."""

from .models import ReviewerAssignment, PullRequestSummary, ReviewerStat, Badge, ReviewerStatsResult, OperationResult
from .votes import classify_vote
from .directory import ReviewerDirectory
from .loader import InputError, load_pull_requests
from .analyzer import ReviewerStatsAnalyzer, aggregate_reviewers, classify_badges, BadgePicker
from .output import ReportFormatter

__all__ = [
    'ReviewerAssignment',
    'PullRequestSummary',
    'ReviewerStat',
    'Badge',
    'ReviewerStatsResult',
    'OperationResult',
    'classify_vote',
    'ReviewerDirectory',
    'InputError',
    'load_pull_requests',
    'ReviewerStatsAnalyzer',
    'aggregate_reviewers',
    'classify_badges',
    'BadgePicker',
    'ReportFormatter',
]
