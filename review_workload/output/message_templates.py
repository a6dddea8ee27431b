"""Message template functions for ReportFormatter."""


def _generate_summary_message(self, reviewer_count: int, total_prs: int, drafts_excluded: int) -> str:
    """One-line summary of a reviewer stats run."""
    return (f"Generated stats for {reviewer_count} reviewers across {total_prs} PRs "
            f"({drafts_excluded} drafts excluded)")


def wrap_code_block(report: str) -> str:
    """Wrap a report in a fenced code block so chat channels keep the alignment."""
    return "```\n" + report + "\n```"
