"""Data models for reviewer workload analysis."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional


def _as_int(value, default: int = 0) -> int:
    """Coerce a raw field to int, falling back to default for junk values."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_bool(value) -> bool:
    """Only real booleans, non-zero numbers and 'true'/'1' strings count as True."""
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1')
    if isinstance(value, (bool, int)):
        return bool(value)
    return False


def _as_str(value, default: str = '') -> str:
    if value is None:
        return default
    return str(value)


@dataclass
class ReviewerAssignment:
    """One reviewer on one pull request."""
    email: str = ''
    display_name: str = 'Unknown'
    is_required: bool = False
    vote: int = 0

    @classmethod
    def from_dict(cls, data: Dict) -> 'ReviewerAssignment':
        """Build an assignment from a review service record.

        Accepts the service's camelCase keys with snake_case fallbacks.
        Missing fields default instead of failing.
        """
        if not isinstance(data, dict):
            logging.warning(f"Ignoring malformed reviewer record: {data!r}")
            return cls()

        email = data.get('uniqueName', data.get('email'))
        display_name = data.get('displayName', data.get('display_name')) or 'Unknown'
        is_required = data.get('isRequired', data.get('is_required', False))

        return cls(
            email=_as_str(email),
            display_name=_as_str(display_name, 'Unknown'),
            is_required=_as_bool(is_required),
            vote=_as_int(data.get('vote'), 0)
        )


@dataclass
class PullRequestSummary:
    """A pull request and its reviewer assignments."""
    id: int = 0
    title: str = ''
    is_draft: bool = False
    reviewers: List[ReviewerAssignment] = field(default_factory=list)
    status: str = ''  # Empty when the source did not report a status
    project: str = ''
    repository: str = ''

    @classmethod
    def from_dict(cls, data: Dict) -> 'PullRequestSummary':
        """Build a summary from a review service pull request record."""
        if not isinstance(data, dict):
            logging.warning(f"Ignoring malformed pull request record: {data!r}")
            return cls()

        repository = data.get('repository')
        if isinstance(repository, dict):
            repo_name = repository.get('name', '')
            project = repository.get('project')
            project_name = project.get('name', '') if isinstance(project, dict) else ''
        else:
            repo_name = repository or ''
            project_name = data.get('project', '')

        raw_reviewers = data.get('reviewers') or []
        if not isinstance(raw_reviewers, list):
            logging.warning(f"Ignoring malformed reviewer list on PR {data.get('pullRequestId', '?')}")
            raw_reviewers = []

        return cls(
            id=_as_int(data.get('pullRequestId', data.get('id')), 0),
            title=_as_str(data.get('title')),
            is_draft=_as_bool(data.get('isDraft', data.get('is_draft', False))),
            reviewers=[ReviewerAssignment.from_dict(r) for r in raw_reviewers],
            status=_as_str(data.get('status')).lower(),
            project=_as_str(project_name),
            repository=_as_str(repo_name)
        )


@dataclass
class ReviewerStat:
    """Workload statistics for one reviewer identity."""
    display_name: str = 'Unknown'
    email: str = ''
    user_id: str = ''  # Filled in from the identity directory when one is configured
    required_count: int = 0
    optional_count: int = 0
    total_count: int = 0
    approved_count: int = 0  # Outcome buckets cover required assignments only
    pending_count: int = 0
    waiting_for_author_count: int = 0
    rejected_count: int = 0
    prs: List[Dict] = field(default_factory=list)


@dataclass
class Badge:
    """A fun status label attached to one reviewer in a report."""
    emoji: str
    title: str
    description: str


@dataclass
class ReviewerStatsResult:
    """Everything a caller needs to display or forward a report."""
    reviewers: List[ReviewerStat] = field(default_factory=list)
    total_prs: int = 0
    drafts_excluded: int = 0
    report: str = ''
    badge: Optional[Badge] = None
    badge_reviewer: str = ''  # Email of the reviewer holding the displayed badge


@dataclass
class OperationResult:
    """Outcome of a reviewer stats run, successful or not."""
    success: bool
    message: str
    data: Optional[ReviewerStatsResult] = None
    error: Optional[str] = None
