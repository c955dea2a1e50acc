"""
services/profile_service.py
---------------------------
Onboarding and settings: balances, salary calendar, language and currency.
"""

from datetime import date
from typing import Optional

from config import DEFAULT_SALARY_INTERVAL_DAYS, SUPPORTED_CURRENCIES, SUPPORTED_LANGUAGES
from models.profile import Snapshot, UserProfile
from repositories.snapshot_repo import SnapshotRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ProfileService:
    """Creates and updates the user's financial profile."""

    def __init__(self, repo: Optional[SnapshotRepository] = None):
        self.repo = repo or SnapshotRepository()

    def ensure_profile(self, user_id: int, name: str = "") -> Snapshot:
        """Return the stored snapshot, creating an empty profile on first contact."""
        snapshot = self.repo.load(user_id)
        if snapshot is not None:
            return snapshot
        snapshot = Snapshot(profile=UserProfile(user_id=user_id, name=name or ""))
        self.repo.save(snapshot)
        logger.info(f"Created profile for user {user_id}")
        return snapshot

    def setup(
        self,
        user_id: int,
        current_balance: float,
        next_salary_date: date,
        salary_interval: int = DEFAULT_SALARY_INTERVAL_DAYS,
        name: str = "",
    ) -> UserProfile:
        """
        Set the spending balance and the salary calendar.

        Raises:
            ValueError: If `salary_interval` is not positive.
        """
        if salary_interval <= 0:
            raise ValueError(f"salary_interval must be positive, got {salary_interval}")

        snapshot = self.ensure_profile(user_id, name)
        profile = snapshot.profile.with_changes(
            current_balance=current_balance,
            next_salary_date=next_salary_date,
            salary_interval=salary_interval,
        )
        self.repo.save(snapshot.with_profile(profile))
        logger.info(f"User {user_id} set up balance and salary calendar")
        return profile

    def set_savings(self, user_id: int, amount: float) -> UserProfile:
        return self._update(user_id, savings_balance=amount)

    def set_language(self, user_id: int, language: str) -> UserProfile:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        return self._update(user_id, language=language)

    def set_currency(self, user_id: int, currency: str) -> UserProfile:
        currency = currency.upper()
        if currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency: {currency}")
        return self._update(user_id, currency=currency)

    def _update(self, user_id: int, **changes) -> UserProfile:
        snapshot = self.ensure_profile(user_id)
        profile = snapshot.profile.with_changes(**changes)
        self.repo.save(snapshot.with_profile(profile))
        return profile
