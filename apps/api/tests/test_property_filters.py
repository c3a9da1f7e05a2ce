"""Parsing of catalog query strings and the predicates built from them."""
from __future__ import annotations

from sqlalchemy.sql.elements import False_

from estate_api.repositories import properties as properties_repo
from estate_api.schemas.property import PropertyFilters


def test_blank_and_malformed_values_are_dropped():
    filters = PropertyFilters.from_query(
        type="  ",
        location="",
        featured="yes",
        min_price="abc",
        max_price="inf",
        limit="-1",
        offset="2.5",
    )

    assert filters == PropertyFilters()
    assert properties_repo.build_conditions(filters) == []


def test_values_are_trimmed_and_parsed():
    filters = PropertyFilters.from_query(
        type="villa",
        listing_type="sale",
        location=" bole ",
        featured=" true ",
        search="garden",
        min_price="1000",
        max_price="2000000.5",
        limit="10",
        offset="20",
    )

    assert filters.property_type == "villa"
    assert filters.location == "bole"
    assert filters.featured is True
    assert filters.min_price == 1000.0
    assert filters.max_price == 2000000.5
    assert filters.limit == 10
    assert filters.offset == 20


def test_each_supplied_filter_adds_one_condition():
    filters = PropertyFilters.from_query(
        type="villa",
        listing_type="sale",
        status="available",
        location="bole",
        featured="true",
        search="garden",
        min_price="1",
        max_price="2",
    )

    # The search group is a single OR condition alongside the others.
    assert len(properties_repo.build_conditions(filters)) == 8


def test_unknown_enum_value_matches_nothing():
    conditions = properties_repo.build_conditions(PropertyFilters(property_type="castle"))

    assert len(conditions) == 1
    assert isinstance(conditions[0], False_)


def test_like_wildcards_in_needle_are_escaped():
    condition = properties_repo.build_conditions(PropertyFilters(location="50%_OFF"))[0]

    assert condition.right.value == "%50\\%\\_off%"
    assert condition.modifiers["escape"] == "\\"


def test_featured_only_filters_on_true():
    assert PropertyFilters.from_query(featured="true").featured is True
    for raw in ("false", "False", "0", "TRUE", ""):
        assert PropertyFilters.from_query(featured=raw).featured is None
