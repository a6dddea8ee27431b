"""
Reviewer identity directory.

Maps reviewer emails to review service identity ids. Known identities are
loaded from a JSON file; ids discovered at runtime are cached in memory and
only persisted on an explicit save().
"""

import json
import logging
import os
from typing import Dict, List, Optional


def _normalize(email: str) -> str:
    return email.strip().lower()


class ReviewerDirectory:
    """Lookup table from reviewer email to identity id."""

    def __init__(self, config_path: str = None, users: Dict[str, str] = None):
        """
        Initialize the ReviewerDirectory.

        Args:
            config_path: Optional path to a JSON file of known identities
            users: Optional mapping of email to identity id, applied after loading
        """
        self.config_path = config_path
        self.users: Dict[str, str] = {}
        self.runtime_cache: Dict[str, str] = {}
        if config_path:
            self._load()
        for email, user_id in (users or {}).items():
            self.users[_normalize(email)] = user_id

    def _load(self) -> None:
        """Load known identities from file if it exists."""
        if not os.path.exists(self.config_path):
            logging.info(f"No identity directory found at {self.config_path}")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, IOError) as e:
            logging.warning(f"Could not load identity directory from {self.config_path}: {e}")
            return

        users = data.get('users', {}) if isinstance(data, dict) else {}
        if not isinstance(users, dict):
            logging.warning(f"Ignoring malformed users section in {self.config_path}")
            users = {}
        for email, entry in users.items():
            user_id = entry.get('id', '') if isinstance(entry, dict) else entry
            if user_id:
                self.users[_normalize(email)] = str(user_id)
        logging.info(f"Loaded identity directory with {len(self.users)} user(s)")

    def save(self) -> None:
        """Persist known and runtime-cached identities to the config file."""
        if not self.config_path:
            return
        merged = dict(self.users)
        merged.update(self.runtime_cache)
        try:
            data = {'users': {email: {'id': user_id} for email, user_id in sorted(merged.items())}}
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            logging.info(f"Saved identity directory with {len(merged)} user(s)")
        except IOError as e:
            logging.error(f"Could not save identity directory to {self.config_path}: {e}")

    def get_user_id(self, email: str) -> Optional[str]:
        """
        Get the identity id for an email.

        Known identities take precedence over the runtime cache.

        Args:
            email: Reviewer email (any case, surrounding whitespace ignored)

        Returns:
            The identity id, or None if unknown
        """
        email = _normalize(email)
        if email in self.users:
            return self.users[email]
        return self.runtime_cache.get(email)

    def cache_user_id(self, email: str, user_id: str) -> None:
        self.runtime_cache[_normalize(email)] = user_id

    def is_known_user(self, email: str) -> bool:
        return _normalize(email) in self.users

    def known_emails(self) -> List[str]:
        return sorted(self.users)
