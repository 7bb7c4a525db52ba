"""Tests for app/modules/localisation/normalizer.py."""
from __future__ import annotations

import pytest

from app.modules.localisation.normalizer import (
    FALLBACK_CITY,
    FALLBACK_COUNTRY,
    FALLBACK_STREET_NAME,
    FALLBACK_STREET_NUMBER,
    SplitAddress,
    legacy_properties,
    normalize,
)


_FULL = SplitAddress(
    street_number="10",
    street_name="Downing Street",
    city="London",
    country="UK",
)


def test_complete_address_is_plain_concatenation():
    result = normalize(_FULL)

    assert result.as_dict() == {
        "address": "10 Downing Street",
        "location": "London, UK",
        "city": "London",
        "country": "UK",
    }


def test_missing_street_number():
    result = normalize(SplitAddress(street_name="Downing Street", city="London", country="UK"))

    assert result.as_dict() == {
        "address": "N/A Downing Street",
        "location": "London, UK",
        "city": "London",
        "country": "UK",
    }


def test_all_fields_missing():
    result = normalize(SplitAddress())

    assert result.as_dict() == {
        "address": "N/A Unknown Street",
        "location": "Unknown City, Unknown Country",
        "city": "Unknown City",
        "country": "Unknown Country",
    }


@pytest.mark.parametrize(
    "missing, fallback",
    [
        ("street_number", FALLBACK_STREET_NUMBER),
        ("street_name", FALLBACK_STREET_NAME),
        ("city", FALLBACK_CITY),
        ("country", FALLBACK_COUNTRY),
    ],
)
def test_single_missing_field_uses_its_fallback_once(missing, fallback):
    fields = {
        "street_number": "10",
        "street_name": "Downing Street",
        "city": "London",
        "country": "UK",
    }
    fields[missing] = None

    result = normalize(SplitAddress(**fields))
    rendered = f"{result.address}|{result.location}"

    assert rendered.count(fallback) == 1
    for name, value in fields.items():
        if value is not None:
            assert value in rendered


def test_legacy_properties_only_formats():
    assert legacy_properties("1", "Main St", "Springfield", "US") == {
        "address": "1 Main St",
        "location": "Springfield, US",
    }
