"""Data models for Netrunner cards and sealed pools."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Side(str, Enum):
    """The two opposing sides of the game."""

    CORP = "Corp"
    RUNNER = "Runner"


class Card(BaseModel):
    """A single card record from the NetrunnerDB card catalog.

    Only ``title``, ``side``, ``type_code``, ``set_code`` and ``cycle_number``
    take part in filtering and sampling; everything else is carried along
    untouched.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
    )

    code: Optional[str] = None
    title: str
    type: Optional[str] = None
    type_code: str
    subtype: Optional[str] = None
    subtype_code: Optional[str] = None
    text: Optional[str] = None
    baselink: Optional[int] = None
    faction: Optional[str] = None
    faction_code: Optional[str] = None
    faction_letter: Optional[str] = None
    flavor: Optional[str] = None
    illustrator: Optional[str] = None
    influence_limit: Optional[int] = Field(None, alias="influencelimit")
    minimum_deck_size: Optional[int] = Field(None, alias="minimumdecksize")
    number: Optional[int] = None
    quantity: Optional[int] = None
    set_name: Optional[str] = Field(None, alias="setname")
    set_code: str
    side: str
    side_code: Optional[str] = None
    uniqueness: Optional[bool] = None
    cycle_number: int = Field(..., alias="cyclenumber")
    last_modified: Optional[str] = Field(None, alias="last-modified")
    url: Optional[str] = None
    image_src: Optional[str] = Field(None, alias="imagesrc")
    large_image_src: Optional[str] = Field(None, alias="largeimagesrc")

    def __str__(self) -> str:
        """Return a short human readable description."""
        return f"{self.title} [{self.side} {self.type_code}, {self.set_code}]"


class ExclusionRules(BaseModel):
    """Cards removed from both candidate lists before sampling.

    A card is excluded when it matches any value of any criterion.
    """

    model_config = ConfigDict(frozen=True)

    # identities are not part of a sealed pool
    type_codes: frozenset[str] = frozenset({"identity"})
    # alternate art printings
    set_codes: frozenset[str] = frozenset({"special", "alt"})
    # unreleased cycle
    cycle_numbers: frozenset[int] = frozenset({6})

    def matches(self, card: Card) -> bool:
        """Return True if the card should be excluded."""
        return (
            card.type_code in self.type_codes
            or card.set_code in self.set_codes
            or card.cycle_number in self.cycle_numbers
        )


@dataclass(frozen=True)
class Candidates:
    """Exclusion-filtered cards per side, in catalog order."""

    corp: tuple[Card, ...]
    runner: tuple[Card, ...]

    def for_side(self, side: Side) -> tuple[Card, ...]:
        """Return the candidate list for one side."""
        return self.corp if side == Side.CORP else self.runner


# title -> number of copies drawn
Pool = Counter[str]
