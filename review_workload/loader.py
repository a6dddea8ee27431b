"""Loading exported pull request listings from disk."""

import os
import json
import logging
from typing import List

from .models import PullRequestSummary


class InputError(Exception):
    """Raised when a pull request export cannot be read."""


def parse_pull_requests(data) -> List[PullRequestSummary]:
    """Convert raw export data into pull request summaries.

    Args:
        data: Either a list of PR records or the service's list envelope
              ({"count": ..., "value": [...]})

    Returns:
        List of PullRequestSummary, one per record
    """
    if isinstance(data, dict):
        data = data.get('value', [])

    if not isinstance(data, list):
        raise InputError(f"Expected a list of pull requests, got {type(data).__name__}")

    return [PullRequestSummary.from_dict(record) for record in data]


def load_pull_requests(path: str) -> List[PullRequestSummary]:
    """Load pull request summaries from a JSON export file.

    Args:
        path: Path to the JSON export

    Returns:
        List of PullRequestSummary

    Raises:
        InputError: If the file is missing or not valid JSON
    """
    if not os.path.exists(path):
        raise InputError(f"Pull request export not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (ValueError, IOError) as e:
        raise InputError(f"Could not read pull request export {path}: {e}") from e

    prs = parse_pull_requests(data)
    logging.info(f"Loaded {len(prs)} pull request(s) from {path}")
    return prs
