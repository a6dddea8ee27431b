"""Reviewer aggregation and scope filtering for pull request summaries."""

import logging
from typing import Dict, List, Optional, Sequence

from ..models import PullRequestSummary, ReviewerStat
from ..votes import (
    classify_vote, vote_label,
    BUCKET_APPROVED, BUCKET_WAITING_FOR_AUTHOR, BUCKET_REJECTED,
)

VALID_STATUSES = ('active', 'completed', 'abandoned', 'all')
DEFAULT_STATUS = 'active'


def normalize_status(status: Optional[str]) -> str:
    """Normalize a status scope, defaulting to 'active' for unknown values."""
    if not status:
        return DEFAULT_STATUS
    status = status.strip().lower()
    if status not in VALID_STATUSES:
        logging.warning(f"Unknown PR status '{status}', using default: {DEFAULT_STATUS}")
        return DEFAULT_STATUS
    return status


def filter_scope(prs: Sequence[PullRequestSummary], status: str = DEFAULT_STATUS,
                 project: str = None, repository: str = None) -> List[PullRequestSummary]:
    """Keep only pull requests inside the requested status/project/repository scope.

    PRs whose source did not report a status are kept, since the collaborator
    that fetched them already scoped the query.

    Args:
        prs: Pull request summaries to filter
        status: Normalized status scope ('all' disables status filtering)
        project: Only keep PRs from this project (case-insensitive)
        repository: Only keep PRs from this repository (case-insensitive)

    Returns:
        Filtered list of PRs, in input order
    """
    project = project.lower() if project else None
    repository = repository.lower() if repository else None

    in_scope = []
    for pr in prs:
        if status != 'all' and pr.status and pr.status != status:
            logging.debug(f"Skipping PR #{pr.id} with status '{pr.status}'")
            continue
        if project and pr.project.lower() != project:
            continue
        if repository and pr.repository.lower() != repository:
            continue
        in_scope.append(pr)

    return in_scope


def count_drafts(prs: Sequence[PullRequestSummary]) -> int:
    return sum(1 for pr in prs if pr.is_draft)


def aggregate_reviewers(prs: Sequence[PullRequestSummary],
                        required_only: bool = True) -> Dict[str, ReviewerStat]:
    """Build per-reviewer workload statistics from pull request summaries.

    Draft PRs are ignored. In required-only mode optional assignments are
    skipped entirely; otherwise they count towards optional_count and
    total_count. Outcome buckets only ever count required assignments, so
    approved + waiting + rejected + pending always equals required_count.

    Args:
        prs: Pull request summaries (already fetched)
        required_only: Skip optional reviewer assignments

    Returns:
        Dictionary mapping normalized email to ReviewerStat, in discovery order
    """
    stats: Dict[str, ReviewerStat] = {}

    for pr in prs:
        if pr.is_draft:
            logging.debug(f"Skipping draft PR #{pr.id}")
            continue

        for reviewer in pr.reviewers:
            if required_only and not reviewer.is_required:
                continue

            email = (reviewer.email or '').strip().lower()
            if not email:
                logging.debug(f"Skipping reviewer without email on PR #{pr.id}")
                continue

            stat = stats.get(email)
            if stat is None:
                stat = ReviewerStat(
                    display_name=reviewer.display_name or 'Unknown',
                    email=reviewer.email.strip()
                )
                stats[email] = stat

            stat.total_count += 1
            if reviewer.is_required:
                stat.required_count += 1
                _count_vote(stat, reviewer.vote)
            else:
                stat.optional_count += 1

            stat.prs.append({
                'id': pr.id,
                'title': pr.title,
                'is_required': reviewer.is_required,
                'vote': vote_label(reviewer.vote)
            })

    logging.debug(f"Aggregated {len(stats)} reviewer(s) from {len(prs)} PR(s)")
    return stats


def _count_vote(stat: ReviewerStat, vote: int):
    """Increment the outcome bucket for a required assignment."""
    bucket = classify_vote(vote)
    if bucket == BUCKET_APPROVED:
        stat.approved_count += 1
    elif bucket == BUCKET_WAITING_FOR_AUTHOR:
        stat.waiting_for_author_count += 1
    elif bucket == BUCKET_REJECTED:
        stat.rejected_count += 1
    else:
        stat.pending_count += 1
