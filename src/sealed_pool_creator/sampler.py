"""Random sealed pool sampling."""

import logging
import random
from collections import Counter
from collections.abc import Sequence
from typing import Optional

from sealed_pool_creator.exceptions import EmptyCandidateListError
from sealed_pool_creator.models import Card, Pool, Side

logger = logging.getLogger(__name__)

# Sub-seeds are drawn from the master seed in this order.
SIDE_ORDER = (Side.CORP, Side.RUNNER)


def side_rngs(seed: int) -> dict[Side, random.Random]:
    """Derive one independent random stream per side from a master seed.

    Args:
        seed: The master seed

    Returns:
        A ``random.Random`` for each side, keyed by side
    """
    # random.Random seeds from abs(seed); mask so negative seeds stay distinct
    master = random.Random(seed & (2**64 - 1))
    return {side: random.Random(master.getrandbits(64)) for side in SIDE_ORDER}


def sample(
    candidates: Sequence[Card],
    n: int,
    rng: random.Random,
    side: Optional[Side] = None,
) -> Pool:
    """Draw ``n`` cards uniformly at random, with replacement.

    Cards are counted by title, so printings sharing a title share an entry.

    Args:
        candidates: The cards to draw from
        n: Number of draws
        rng: Random stream consumed once per draw
        side: Side label used in error messages

    Returns:
        Mapping of title to number of copies drawn

    Raises:
        EmptyCandidateListError: If there are no candidates and ``n > 0``.
    """
    if n < 0:
        raise ValueError(f"Pool size must not be negative, got {n}")
    if n and not candidates:
        raise EmptyCandidateListError(side.value if side else None, n)

    pool: Pool = Counter()
    for _ in range(n):
        card = candidates[rng.randrange(len(candidates))]
        pool[card.title] += 1

    logger.debug(f"Drew {n} cards, {len(pool)} distinct titles")
    return pool
