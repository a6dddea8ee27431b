"""Canonical reviewer stats pipeline."""

import random
import logging
from typing import Callable, List, Sequence

from ..models import OperationResult, PullRequestSummary, ReviewerStatsResult
from ..directory import ReviewerDirectory
from ..output import ReportFormatter, sort_reviewers
from .aggregation import aggregate_reviewers, count_drafts, filter_scope, normalize_status
from .badges import BadgePicker, classify_badges

ERROR_CODE = 'REVIEWER_STATS_FAILED'


class ReviewerStatsAnalyzer:
    """Aggregates reviewer workload, picks a badge and renders the report.

    Every caller (CLI, scheduled job, service hook) goes through this class
    so the statistics are computed one way only.
    """

    def __init__(
        self,
        required_only: bool = True,
        status: str = 'active',
        project: str = None,
        repository: str = None,
        rng: random.Random = None,
        directory: ReviewerDirectory = None
    ):
        """Initialize the analyzer.

        Args:
            required_only: Only count required reviewer assignments
            status: PR status scope ('active', 'completed', 'abandoned', 'all')
            project: Only consider PRs from this project
            repository: Only consider PRs from this repository
            rng: Random source for the badge pick (seed it for reproducible reports)
            directory: Identity lookup used to fill in reviewer ids
        """
        self.required_only = required_only
        self.status = normalize_status(status)
        self.project = project
        self.repository = repository
        self.badge_picker = BadgePicker(rng)
        self.directory = directory
        self.formatter = ReportFormatter(required_only, self.status)

    def run(self, prs: Sequence[PullRequestSummary]) -> OperationResult:
        """Compute reviewer statistics and the report for already fetched PRs."""
        in_scope = filter_scope(prs, self.status, self.project, self.repository)
        drafts_excluded = count_drafts(in_scope)
        total_prs = len(in_scope) - drafts_excluded

        stats = aggregate_reviewers(in_scope, self.required_only)
        reviewers = sort_reviewers(stats.values())
        self._resolve_user_ids(reviewers)

        visible = self.formatter.visible_reviewers(reviewers)
        badge = self.badge_picker.pick(classify_badges(visible))
        report = self.formatter.render(reviewers, total_prs, badge)

        result = ReviewerStatsResult(
            reviewers=reviewers,
            total_prs=total_prs,
            drafts_excluded=drafts_excluded,
            report=report
        )
        if badge:
            result.badge_reviewer, result.badge = badge[0].email, badge[1]

        message = self.formatter._generate_summary_message(len(reviewers), total_prs, drafts_excluded)
        logging.info(message)
        return OperationResult(success=True, message=message, data=result)

    def run_from(self, fetch: Callable[[], List[PullRequestSummary]]) -> OperationResult:
        """Fetch PRs with the given collaborator and run the pipeline.

        Fetch failures are reported as an unsuccessful result, never as an
        empty report.
        """
        try:
            prs = fetch()
        except Exception as e:
            logging.error(f"Failed to fetch pull requests: {e}", exc_info=True)
            return OperationResult(
                success=False,
                message=f"Failed to get reviewer stats: {e}",
                error=ERROR_CODE
            )
        return self.run(prs)

    def _resolve_user_ids(self, reviewers):
        if self.directory is None:
            return
        for r in reviewers:
            user_id = self.directory.get_user_id(r.email)
            if user_id:
                r.user_id = user_id
            else:
                logging.debug(f"No identity id known for {r.email}")
