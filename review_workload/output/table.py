"""Fixed-width table rendering for ReportFormatter."""

from typing import List

from ..models import ReviewerStat


COLUMN_SEPARATOR = '  '

REQUIRED_ONLY_COLUMNS = [
    ('Required', 'required_count'),
    ('Approved', 'approved_count'),
    ('Waiting for Author', 'waiting_for_author_count'),
    ('Rejected', 'rejected_count'),
    ('Unreviewed', 'pending_count'),
]

FULL_COLUMNS = [
    ('Required', 'required_count'),
    ('Optional', 'optional_count'),
    ('Total', 'total_count'),
    ('Approved', 'approved_count'),
    ('Waiting for Author', 'waiting_for_author_count'),
    ('Rejected', 'rejected_count'),
    ('Unreviewed', 'pending_count'),
]


def _table_columns(self) -> list:
    """Numeric columns for the current view as (header, attribute) pairs."""
    return REQUIRED_ONLY_COLUMNS if self.required_only else FULL_COLUMNS


def _render_table(self, stats: List[ReviewerStat]) -> List[str]:
    """Render header, separator and one row per reviewer."""
    columns = self._table_columns()
    name_width = max(self.min_name_width, *(len(r.display_name) for r in stats))

    # Numeric columns are exactly as wide as their header
    headers = ['Reviewer'] + [header for header, _ in columns]
    widths = [name_width] + [len(header) for header, _ in columns]

    lines = [
        COLUMN_SEPARATOR.join(h.ljust(w) for h, w in zip(headers, widths)),
        COLUMN_SEPARATOR.join('-' * w for w in widths),
    ]
    for r in stats:
        lines.append(self._render_row(r, columns, widths))

    return lines


def _render_row(self, r: ReviewerStat, columns: list, widths: List[int]) -> str:
    cells = [r.display_name.ljust(widths[0])]
    for (_, attribute), width in zip(columns, widths[1:]):
        cells.append(str(getattr(r, attribute)).rjust(width))
    return COLUMN_SEPARATOR.join(cells)
