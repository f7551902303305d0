"""Netrunner sealed pool creator package."""

__version__ = "0.1.0"

from sealed_pool_creator.core import RunResult, SealedPoolCreator
from sealed_pool_creator.models import Card, ExclusionRules, Side

__all__ = ["SealedPoolCreator", "RunResult", "Card", "ExclusionRules", "Side"]
