"""Report formatting for reviewer workload statistics."""

from typing import List, Optional, Sequence, Tuple

from ..models import Badge, ReviewerStat


MIN_NAME_WIDTH = 8


def sort_reviewers(stats: Sequence[ReviewerStat]) -> List[ReviewerStat]:
    """Sort by required reviews, then total reviews, both descending.

    sorted() is stable, so further ties keep discovery order.
    """
    return sorted(stats, key=lambda r: (-r.required_count, -r.total_count))


class ReportFormatter:
    """Formats reviewer statistics into a fixed-width text report."""

    def __init__(self, required_only: bool = True, status: str = 'active', min_name_width: int = MIN_NAME_WIDTH):
        """Initialize the report formatter.

        Args:
            required_only: Show only required reviewer columns and reviewers with required reviews
            status: Status scope of the PRs, used in the report title
            min_name_width: Minimum width of the reviewer name column
        """
        self.required_only = required_only
        self.status = status
        self.min_name_width = min_name_width

    def visible_reviewers(self, stats: Sequence[ReviewerStat]) -> List[ReviewerStat]:
        """Apply the display-time filter for the current view."""
        if self.required_only:
            return [r for r in stats if r.required_count > 0]
        return list(stats)

    def _title(self, total_prs: int) -> str:
        if self.status == 'all':
            return f"Reviewer Statistics ({total_prs} PRs)"
        return f"Reviewer Statistics ({total_prs} {self.status.capitalize()} PRs)"

    def render(self, stats: Sequence[ReviewerStat], total_prs: int,
               badge: Optional[Tuple[ReviewerStat, Badge]] = None) -> str:
        """Render the full report.

        Args:
            stats: Aggregated reviewer statistics (any order)
            total_prs: Number of non-draft PRs considered
            badge: Selected (reviewer, badge) pair to call out, if any

        Returns:
            Plain text report, safe to embed in a fixed-width code block
        """
        lines = [self._title(total_prs), '']

        visible = sort_reviewers(self.visible_reviewers(stats))
        if not visible:
            lines.append("No reviewers found.")
            return '\n'.join(lines)

        lines.extend(self._render_table(visible))

        if badge:
            _, chosen = badge
            lines.append('')
            lines.append(f"{chosen.emoji} {chosen.title}: {chosen.description}")

        return '\n'.join(lines)


# Import and attach methods from submodules
from .table import _table_columns, _render_table, _render_row
from .message_templates import _generate_summary_message

ReportFormatter._table_columns = _table_columns
ReportFormatter._render_table = _render_table
ReportFormatter._render_row = _render_row
ReportFormatter._generate_summary_message = _generate_summary_message
