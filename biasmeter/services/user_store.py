"""
In-memory user repository.

Holds credentials (email -> plaintext password) and profiles
(email -> Profile). A single lock makes registration an atomic
insert-if-absent, so concurrent registrations of the same email yield
exactly one winner.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Iterable, Optional, Set

from biasmeter.core.errors import (
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidEmailError,
    WeakPasswordError,
)
from biasmeter.core.security import is_strong_password, is_valid_email
from biasmeter.demo.accounts import DEMO_ACCOUNTS
from biasmeter.models.user_model import Profile

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._lock = threading.Lock()
        self._passwords: Dict[str, str] = {}
        self._profiles: Dict[str, Profile] = {}
        for account in seed or []:
            self._insert(
                account["email"],
                account["password"],
                Profile(
                    email=account["email"],
                    name=account["name"],
                    role=account.get("role", "user"),
                    company=account["company"],
                ),
            )

    @classmethod
    def with_demo_accounts(cls) -> "UserStore":
        return cls(seed=DEMO_ACCOUNTS)

    def _insert(self, email: str, password: str, profile: Profile) -> bool:
        with self._lock:
            if email in self._passwords:
                return False
            self._passwords[email] = password
            self._profiles[email] = profile
            return True

    def register(
        self,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str] = None,
        company: Optional[str] = None,
    ) -> Profile:
        if not is_valid_email(email):
            raise InvalidEmailError()
        if not is_strong_password(password):
            raise WeakPasswordError()

        profile = Profile(
            email=email,
            name=name if name is not None else "New User",
            role="user",
            company=company if company is not None else "Personal",
        )
        if not self._insert(email, password, profile):
            raise DuplicateUserError()

        logger.info("Registered new user %s", email)
        return profile

    def login(self, email: Optional[str], password: Optional[str]) -> Profile:
        """Return the profile for matching credentials.

        Unknown email and wrong password raise the same error so callers
        cannot probe which accounts exist.
        """
        with self._lock:
            stored = self._passwords.get(email) if email is not None else None
            profile = self._profiles.get(email) if email is not None else None
        if stored is None or password is None or stored != password:
            raise InvalidCredentialsError()
        return profile

    def count(self) -> int:
        with self._lock:
            return len(self._passwords)

    def list_emails(self) -> Set[str]:
        with self._lock:
            return set(self._passwords)
