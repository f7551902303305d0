"""Pytest configuration and fixtures."""

import json
import os
from pathlib import Path

import pytest
from sealed_pool_creator.config import Settings
from sealed_pool_creator.models import Card


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch) -> None:
    """Run every test in an empty directory without SEALED_POOL_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.upper().startswith("SEALED_POOL_"):
            monkeypatch.delenv(name)


def _card_data(title: str, side: str = "Corp", **fields) -> dict:
    """Return a catalog entry with the fields the loader needs."""
    data = {
        "title": title,
        "side": side,
        "type_code": "operation" if side == "Corp" else "event",
        "set_code": "core",
        "cyclenumber": 1,
    }
    data.update(fields)
    return data


def _make_card(title: str, side: str = "Corp", **fields) -> Card:
    """Return a validated Card."""
    return Card.model_validate(_card_data(title, side, **fields))


@pytest.fixture
def card_data():
    """Provide a factory for raw catalog entries."""
    return _card_data


@pytest.fixture
def make_card():
    """Provide a factory for validated cards."""
    return _make_card


@pytest.fixture
def example_catalog() -> list[dict]:
    """Provide the three-card catalog used throughout the docs."""
    return [
        _card_data("Sure Gamble", side="Runner", type_code="event"),
        _card_data("Hedge Fund", side="Corp", type_code="operation"),
        _card_data("Ghost Branch", side="Corp", type_code="identity"),
    ]


@pytest.fixture
def netrunnerdb_card() -> dict:
    """Provide a full card entry as published by NetrunnerDB."""
    return {
        "last-modified": "2014-06-11T08:27:25+00:00",
        "code": "01110",
        "title": "Hedge Fund",
        "type": "Operation",
        "type_code": "operation",
        "subtype": "Transaction",
        "subtype_code": "transaction",
        "text": "Gain 9[Credits].",
        "faction": "Neutral",
        "faction_code": "neutral-corp",
        "faction_letter": "-",
        "flavor": "Hedge your bets.",
        "illustrator": "Gong Studios",
        "number": 110,
        "quantity": 3,
        "setname": "Core Set",
        "set_code": "core",
        "side": "Corp",
        "side_code": "corp",
        "uniqueness": False,
        "cyclenumber": 1,
        "url": "http://netrunnerdb.com/en/card/01110",
        "imagesrc": "/bundles/netrunnerdbcards/images/cards/en/01110.png",
    }


@pytest.fixture
def catalog_file(tmp_path, example_catalog) -> Path:
    """Write the example catalog to disk."""
    path = tmp_path / "data" / "cards.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(example_catalog), encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path, catalog_file) -> Settings:
    """Provide settings pointing at the example catalog."""
    return Settings(
        pool_size=3,
        seed=42,
        cards_path=catalog_file,
        output_dir=tmp_path / "pools",
    )
