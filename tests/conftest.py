"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from theater.domain import Invoice, Performance, Play, PlayType
from theater.domain.value_objects import Audience


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play(name="Hamlet", type=PlayType.TRAGEDY),
        "as-like": Play(name="As You Like It", type=PlayType.COMEDY),
    }


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=Audience(55)),
            Performance(play_id="as-like", audience=Audience(35)),
        ),
    )


@pytest.fixture
def raw_plays() -> dict:
    return {
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
    }


@pytest.fixture
def raw_invoice() -> dict:
    return {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
        ],
    }
