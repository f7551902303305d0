"""Core functionality for the Sealed Pool Creator."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO, Union

from sealed_pool_creator.config import Settings
from sealed_pool_creator.exceptions import PoolWriteError, SealedPoolError
from sealed_pool_creator.loader import load_catalog, read_catalog
from sealed_pool_creator.models import Pool, Side
from sealed_pool_creator.sampler import SIDE_ORDER, sample, side_rngs
from sealed_pool_creator.writer import pool_filename, write_pool

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a run: the pools and files produced, or the failure."""

    pools: dict[Side, Pool] = field(default_factory=dict)
    paths: dict[Side, Path] = field(default_factory=dict)
    error: Optional[SealedPoolError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


class SealedPoolCreator:
    """Build a Corp and a Runner sealed pool from a card catalog."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the creator.

        Args:
            settings: Run configuration (default: read from the environment)
        """
        self.settings = settings or Settings()

    def build_pools(self, raw: Union[bytes, str]) -> dict[Side, Pool]:
        """Load the catalog and sample one pool per side.

        Each side draws from its own stream derived from the seed, so the
        pools do not depend on the order in which sides are sampled.
        """
        candidates = load_catalog(raw, self.settings.exclusion_rules())

        logger.info(
            f"Generating pools of size {self.settings.pool_size} "
            f"with seed {self.settings.seed}."
        )
        rngs = side_rngs(self.settings.seed)
        return {
            side: sample(
                candidates.for_side(side),
                self.settings.pool_size,
                rngs[side],
                side=side,
            )
            for side in SIDE_ORDER
        }

    def write_pools(self, pools: dict[Side, Pool]) -> dict[Side, Path]:
        """Write each pool to its own file under the output directory.

        Returns:
            Path of the file written for each side
        """
        output_dir = self.settings.output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PoolWriteError(output_dir, e.strerror or str(e)) from e

        paths = {}
        for side in SIDE_ORDER:
            path = output_dir / pool_filename(
                side, self.settings.pool_size, self.settings.seed
            )
            write_pool(pools[side], side, path)
            paths[side] = path
        return paths

    def print_pools(self, pools: dict[Side, Pool], stream: TextIO) -> None:
        """Write both pools to a text stream, separated by a blank line."""
        for index, side in enumerate(SIDE_ORDER):
            if index:
                stream.write("\n")
            write_pool(pools[side], side, stream)

    def run(self, stream: Optional[TextIO] = None) -> RunResult:
        """Read the catalog, build both pools and write them out.

        Args:
            stream: Destination when ``to_stdout`` is set (default: sys.stdout)

        Returns:
            The pools and written paths, or the error that stopped the run
        """
        result = RunResult()
        try:
            raw = read_catalog(self.settings.cards_path)
            result.pools = self.build_pools(raw)
            if self.settings.to_stdout:
                self.print_pools(result.pools, stream or sys.stdout)
            else:
                result.paths = self.write_pools(result.pools)
        except SealedPoolError as e:
            logger.debug(f"Run failed: {e!r}")
            result.error = e
        return result
