"""Environment-driven settings for the reviewer stats report."""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .analyzer.aggregation import normalize_status

VALID_OUTPUT_FORMATS = ('text', 'codeblock', 'json')


@dataclass
class Settings:
    """Resolved configuration for one report run."""
    input_path: Optional[str] = None
    required_only: bool = True
    status: str = 'active'
    project: Optional[str] = None
    repository: Optional[str] = None
    output_format: str = 'text'
    identity_config: Optional[str] = None
    badge_seed: Optional[int] = None


def _optional(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name, '').strip()
    return value or None


def load_settings(env: Mapping[str, str] = None) -> Settings:
    """Read settings from the environment.

    Invalid values are logged and replaced by their defaults.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance
    """
    if env is None:
        env = os.environ

    settings = Settings(
        input_path=_optional(env, 'REVIEWER_STATS_INPUT'),
        required_only=env.get('REQUIRED_ONLY', 'true').lower() not in ('false', '0', 'no'),
        status=normalize_status(env.get('PR_STATUS')),
        project=_optional(env, 'PR_PROJECT'),
        repository=_optional(env, 'PR_REPOSITORY'),
        identity_config=_optional(env, 'IDENTITY_CONFIG')
    )

    output_format = env.get('OUTPUT_FORMAT', 'text').strip().lower()
    if output_format not in VALID_OUTPUT_FORMATS:
        logging.warning(f"Invalid OUTPUT_FORMAT value '{output_format}', using default: text")
        logging.warning(f"Valid options: {', '.join(VALID_OUTPUT_FORMATS)}")
        output_format = 'text'
    settings.output_format = output_format

    seed_env = _optional(env, 'BADGE_SEED')
    if seed_env:
        try:
            settings.badge_seed = int(seed_env)
        except ValueError:
            logging.warning(f"Invalid BADGE_SEED value '{seed_env}', ignoring")

    if not settings.required_only:
        logging.info("Showing all reviewers including optional assignments")
    if settings.project or settings.repository:
        logging.info(f"Scoping to project={settings.project or '*'} repository={settings.repository or '*'}")

    return settings
