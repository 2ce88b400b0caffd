"""
Rewardman configuration.

Usage in settings.py:
    REWARDMAN = {
        "STORE_BACKEND": "rewardman.adapters.django_store.DjangoRewardStore",
        "DEFAULT_PAGE_SIZE": 10,
        "MAX_PAGE_SIZE": 100,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class RewardmanSettings:
    """Rewardman configuration settings."""

    # Persistence collaborator (implements protocols.store.RewardStore)
    STORE_BACKEND: str = "rewardman.adapters.django_store.DjangoRewardStore"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100


def get_rewardman_settings() -> RewardmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "REWARDMAN", {})
    return RewardmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_rewardman_settings(), name)


rewardman_settings = _LazySettings()
