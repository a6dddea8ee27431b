"""Badge classification for reviewer workload reports."""

import random
import logging
from threading import Lock
from typing import List, Optional, Sequence, Tuple

from ..models import Badge, ReviewerStat

# Volume thresholds relative to the group average of required reviews
HIGH_VOLUME_FACTOR = 1.5
LOW_VOLUME_FACTOR = 0.5
LOW_VOLUME_FLOOR = 1

SUPER_REVIEWER_COMPLETION = 0.8
NEEDS_BACKUP_UNREVIEWED = 0.5
NEEDS_COFFEE_UNREVIEWED = 0.7
NEEDS_COFFEE_MIN_PENDING = 2
FLAWLESS_MIN_REQUIRED = 2
WAITING_ROOM_MIN_WAITING = 2
SPEED_DEMON_COMPLETION = 0.7


def _first_name(display_name: str) -> str:
    parts = display_name.split()
    return parts[0] if parts else display_name


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


def average_required(stats: Sequence[ReviewerStat]) -> float:
    """Mean required_count over reviewers with required reviews (0 if there are none)."""
    assigned = [r for r in stats if r.required_count > 0]
    if not assigned:
        return 0
    return sum(r.required_count for r in assigned) / len(assigned)


def match_badge(r: ReviewerStat, avg_required: float) -> Optional[Badge]:
    """Return the first badge rule this reviewer satisfies, if any.

    Rules are evaluated in a fixed order; a reviewer never holds more
    than one badge.
    """
    if r.required_count == 0:
        return None

    completion_rate = r.approved_count / r.required_count
    unreviewed_rate = r.pending_count / r.required_count
    is_high_volume = r.required_count >= avg_required * HIGH_VOLUME_FACTOR
    is_low_volume = r.required_count <= max(LOW_VOLUME_FLOOR, avg_required * LOW_VOLUME_FACTOR)
    is_med_volume = not is_high_volume and not is_low_volume

    name = _first_name(r.display_name)

    if is_high_volume and completion_rate >= SUPER_REVIEWER_COMPLETION:
        return Badge("🦸", "Super Reviewer",
                     f"{name} is crushing it with {r.approved_count}/{r.required_count} reviews complete!")
    elif is_high_volume and unreviewed_rate >= NEEDS_BACKUP_UNREVIEWED:
        return Badge("🆘", "Needs Backup",
                     f"{name} has {r.pending_count} unreviewed PRs - someone throw them a lifeline!")
    elif ((is_low_volume or is_med_volume) and unreviewed_rate >= NEEDS_COFFEE_UNREVIEWED
          and r.pending_count >= NEEDS_COFFEE_MIN_PENDING):
        return Badge("😴", "Needs Coffee",
                     f"{name} has {r.pending_count} PRs waiting... wakey wakey!")
    elif is_low_volume and r.required_count <= 1:
        return Badge("🪑", "Benchwarmer",
                     f"{name} is barely in the game with only {r.required_count} "
                     f"{_plural(r.required_count, 'PR')}. Put them in, coach!")
    elif r.required_count >= FLAWLESS_MIN_REQUIRED and completion_rate == 1:
        return Badge("✨", "Flawless",
                     f"{name} has reviewed every single PR assigned. Respect.")
    elif r.rejected_count >= 1:
        return Badge("🚫", "Gatekeeper",
                     f"{name} isn't afraid to say no - {r.rejected_count} "
                     f"{_plural(r.rejected_count, 'rejection')} and counting.")
    elif r.waiting_for_author_count >= WAITING_ROOM_MIN_WAITING:
        return Badge("⏳", "Waiting Room",
                     f"{name} is stuck waiting on authors for {r.waiting_for_author_count} PRs. "
                     f"Ball's in your court, devs!")
    elif is_med_volume and completion_rate >= SPEED_DEMON_COMPLETION:
        return Badge("⚡", "Speed Demon",
                     f"{name} is keeping the pipeline moving with {r.approved_count}/{r.required_count} done.")

    return None


def classify_badges(stats: Sequence[ReviewerStat]) -> List[Tuple[ReviewerStat, Badge]]:
    """Assign at most one badge to each reviewer.

    Args:
        stats: Reviewers visible in the report

    Returns:
        List of (reviewer, badge) pairs in input order
    """
    avg_required = average_required(stats)
    badges = []

    for r in stats:
        badge = match_badge(r, avg_required)
        if badge:
            logging.debug(f"{r.email} qualifies for badge '{badge.title}'")
            badges.append((r, badge))

    return badges


class BadgePicker:
    """Chooses the single badge surfaced in a report.

    The random source is injectable so runs can be made reproducible. Access
    to it is serialized because random.Random is stateful.
    """

    def __init__(self, rng: random.Random = None):
        self.rng = rng if rng is not None else random.Random()
        self._lock = Lock()

    def pick(self, candidates: Sequence[Tuple[ReviewerStat, Badge]]) -> Optional[Tuple[ReviewerStat, Badge]]:
        if not candidates:
            return None
        with self._lock:
            return self.rng.choice(list(candidates))
