"""Command-line entry point for the reviewer stats report."""

import os
import sys
import json
import random
import logging
from dataclasses import asdict
from dotenv import load_dotenv

from .analyzer import ReviewerStatsAnalyzer
from .directory import ReviewerDirectory
from .loader import load_pull_requests
from .models import OperationResult
from .output import wrap_code_block
from .settings import load_settings


def configure_logging():
    """Configure root logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def output(result: OperationResult):
    print(json.dumps(asdict(result), indent=2, ensure_ascii=False))


def main():
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    configure_logging()

    settings = load_settings()
    if not settings.input_path:
        logging.error("REVIEWER_STATS_INPUT is required (path to a pull request export)")
        sys.exit(1)

    directory = None
    if settings.identity_config:
        directory = ReviewerDirectory(settings.identity_config)

    rng = random.Random(settings.badge_seed) if settings.badge_seed is not None else None

    analyzer = ReviewerStatsAnalyzer(
        required_only=settings.required_only,
        status=settings.status,
        project=settings.project,
        repository=settings.repository,
        rng=rng,
        directory=directory
    )

    logging.info(f"Generating reviewer stats from {settings.input_path}")
    result = analyzer.run_from(lambda: load_pull_requests(settings.input_path))

    if not result.success:
        output(result)
        sys.exit(1)

    if settings.output_format == 'json':
        output(result)
    elif settings.output_format == 'codeblock':
        print(wrap_code_block(result.data.report))
    else:
        print(result.data.report)


if __name__ == "__main__":
    main()
