"""Catalog loading: parse the card catalog and split it into candidate lists."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from sealed_pool_creator.exceptions import (
    CatalogReadError,
    MalformedCardError,
    MalformedCatalogError,
)
from sealed_pool_creator.models import Candidates, Card, ExclusionRules, Side

logger = logging.getLogger(__name__)


def read_catalog(path: Union[str, Path]) -> bytes:
    """Read the raw catalog bytes from disk.

    Raises:
        CatalogReadError: If the file is missing or unreadable.
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise CatalogReadError(path, e.strerror or str(e)) from e


def parse_catalog(raw: Union[bytes, str]) -> list[Card]:
    """Parse a JSON array of card objects.

    Args:
        raw: The catalog contents

    Returns:
        Every card, in catalog order

    Raises:
        MalformedCatalogError: If the input is not a JSON array.
        MalformedCardError: If any element is not a valid card.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedCatalogError(f"Card catalog is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedCatalogError(
            f"Card catalog must be a JSON array, got {type(data).__name__}"
        )

    cards = []
    for index, entry in enumerate(data):
        try:
            cards.append(Card.model_validate(entry))
        except ValidationError as e:
            raise MalformedCardError(index, _describe(e)) from e

    logger.debug(f"Parsed {len(cards)} cards from catalog")
    return cards


def _describe(error: ValidationError) -> str:
    """Summarise a validation error on one line."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "card"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


def partition(cards: Iterable[Card], rules: ExclusionRules) -> Candidates:
    """Split cards into Corp and Runner candidate lists.

    Cards of any other side are dropped, as are cards matched by ``rules``.
    Catalog order is kept.
    """
    corp = []
    runner = []

    for card in cards:
        if card.side == Side.CORP.value:
            target = corp
        elif card.side == Side.RUNNER.value:
            target = runner
        else:
            logger.debug(f"Dropping card with unknown side: {card}")
            continue

        if rules.matches(card):
            logger.debug(f"Excluding card: {card}")
            continue

        target.append(card)

    return Candidates(corp=tuple(corp), runner=tuple(runner))


def load_catalog(raw: Union[bytes, str], rules: ExclusionRules) -> Candidates:
    """Parse the catalog and build both candidate lists."""
    candidates = partition(parse_catalog(raw), rules)

    logger.info(f"Number of corp cards: {len(candidates.corp)}")
    logger.info(f"Number of runner cards: {len(candidates.runner)}")
    return candidates
