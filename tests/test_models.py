"""
Unit tests for data models
"""

import pytest
from review_workload.models import ReviewerAssignment, PullRequestSummary, ReviewerStat


class TestReviewerStat:
    """Test cases for ReviewerStat dataclass."""

    def test_reviewer_stat_initialization(self):
        """Test that ReviewerStat initializes with default values."""
        stat = ReviewerStat()
        assert stat.display_name == 'Unknown'
        assert stat.email == ''
        assert stat.user_id == ''
        assert stat.required_count == 0
        assert stat.optional_count == 0
        assert stat.total_count == 0
        assert stat.approved_count == 0
        assert stat.pending_count == 0
        assert stat.waiting_for_author_count == 0
        assert stat.rejected_count == 0
        assert stat.prs == []

    def test_pr_lists_are_independent(self):
        """Test that each instance gets its own PR list."""
        first = ReviewerStat()
        second = ReviewerStat()
        first.prs.append({'id': 1})
        assert second.prs == []


class TestReviewerAssignmentFromDict:
    """Test cases for building assignments from service records."""

    def test_service_keys(self):
        """Test parsing the review service's camelCase keys."""
        assignment = ReviewerAssignment.from_dict({
            'uniqueName': 'Alice@Example.com',
            'displayName': 'Alice Smith',
            'isRequired': True,
            'vote': 10
        })
        assert assignment.email == 'Alice@Example.com'
        assert assignment.display_name == 'Alice Smith'
        assert assignment.is_required is True
        assert assignment.vote == 10

    def test_snake_case_fallbacks(self):
        """Test parsing snake_case keys."""
        assignment = ReviewerAssignment.from_dict({
            'email': 'bob@example.com',
            'display_name': 'Bob',
            'is_required': True,
            'vote': -5
        })
        assert assignment.email == 'bob@example.com'
        assert assignment.display_name == 'Bob'
        assert assignment.is_required is True
        assert assignment.vote == -5

    def test_missing_fields_default(self):
        """Test that missing fields degrade to defaults."""
        assignment = ReviewerAssignment.from_dict({})
        assert assignment.email == ''
        assert assignment.display_name == 'Unknown'
        assert assignment.is_required is False
        assert assignment.vote == 0

    def test_junk_vote_defaults_to_zero(self):
        """Test that a non-numeric vote becomes 0."""
        assert ReviewerAssignment.from_dict({'vote': 'lots'}).vote == 0
        assert ReviewerAssignment.from_dict({'vote': None}).vote == 0
        assert ReviewerAssignment.from_dict({'vote': '10'}).vote == 10

    def test_non_dict_record(self):
        """Test that a non-dict record yields an empty assignment."""
        assignment = ReviewerAssignment.from_dict('not a reviewer')
        assert assignment.email == ''


class TestPullRequestSummaryFromDict:
    """Test cases for building PR summaries from service records."""

    def test_service_record(self):
        """Test parsing a full review service PR record."""
        pr = PullRequestSummary.from_dict({
            'pullRequestId': 42,
            'title': 'Add login',
            'isDraft': False,
            'status': 'Active',
            'repository': {'name': 'web', 'project': {'name': 'Platform'}},
            'reviewers': [
                {'uniqueName': 'alice@example.com', 'displayName': 'Alice', 'isRequired': True, 'vote': 10},
                {'uniqueName': 'bob@example.com', 'displayName': 'Bob', 'vote': 0}
            ]
        })
        assert pr.id == 42
        assert pr.title == 'Add login'
        assert pr.is_draft is False
        assert pr.status == 'active'
        assert pr.repository == 'web'
        assert pr.project == 'Platform'
        assert len(pr.reviewers) == 2
        assert pr.reviewers[1].is_required is False

    def test_missing_fields_default(self):
        """Test that an empty record becomes an empty summary."""
        pr = PullRequestSummary.from_dict({})
        assert pr.id == 0
        assert pr.title == ''
        assert pr.is_draft is False
        assert pr.reviewers == []
        assert pr.status == ''

    @pytest.mark.parametrize('raw,expected', [
        ('false', False),
        ('False', False),
        ('0', False),
        ('', False),
        (None, False),
        ('true', True),
        ('1', True),
        (True, True),
        (False, False),
    ])
    def test_draft_flag_parsing(self, raw, expected):
        """Test that only true values mark a PR as draft."""
        assert PullRequestSummary.from_dict({'isDraft': raw}).is_draft is expected

    def test_required_flag_string(self):
        """Test that a string 'false' does not make a reviewer required."""
        assert ReviewerAssignment.from_dict({'isRequired': 'false'}).is_required is False
        assert ReviewerAssignment.from_dict({'isRequired': 'true'}).is_required is True

    def test_malformed_reviewer_list(self):
        """Test that a non-list reviewers field is ignored."""
        pr = PullRequestSummary.from_dict({'pullRequestId': 1, 'reviewers': 'nobody'})
        assert pr.reviewers == []

    def test_null_reviewers(self):
        """Test that a null reviewers field is treated as empty."""
        pr = PullRequestSummary.from_dict({'pullRequestId': 1, 'reviewers': None})
        assert pr.reviewers == []

    def test_flat_project_and_repository(self):
        """Test plain string project and repository fields."""
        pr = PullRequestSummary.from_dict({'id': 3, 'project': 'Platform', 'repository': 'api'})
        assert pr.id == 3
        assert pr.project == 'Platform'
        assert pr.repository == 'api'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
