"""Tests for the aggregator."""

from meteoritestory.controller import aggregate


def test_decade_counts_sorted_by_decade(make_record):
    records = [make_record(year=2005), make_record(year=1990), make_record(year=1991)]
    assert aggregate.decade_counts(records) == [(1990, 2), (2000, 1)]


def test_decade_counts_empty():
    assert aggregate.decade_counts([]) == []


def test_top_by_mass_limits_and_orders(landings):
    top = aggregate.top_by_mass(landings)
    assert len(top) == 10
    masses = [r.mass for r in top]
    assert masses == sorted(masses, reverse=True)
    assert top[0].name == "nowhere-1"


def test_top_by_mass_is_idempotent(landings):
    once = aggregate.top_by_mass(landings)
    assert aggregate.top_by_mass(once) == once


def test_top_by_mass_keeps_dataset_order_for_ties(make_record):
    records = [make_record(name=n, mass=50.0) for n in "abc"] + [make_record(name="big", mass=80.0)]
    assert [r.name for r in aggregate.top_by_mass(records, n=3)] == ["big", "a", "b"]


def test_top_by_mass_smaller_dataset(make_record):
    records = [make_record(mass=2.0), make_record(mass=1.0)]
    assert len(aggregate.top_by_mass(records)) == 2


def test_heaviest_first_occurrence_wins(make_record):
    records = [make_record(name="first", mass=9.0), make_record(name="second", mass=9.0)]
    assert aggregate.heaviest(records).name == "first"
    assert aggregate.heaviest([]) is None


def test_geolocated_drops_missing_coordinates(landings, make_record):
    points = aggregate.geolocated(landings)
    assert len(points) == 12
    assert aggregate.geolocated([make_record(lat=10.0)]) == []


def test_filter_year_and_class(filter_records):
    subset = aggregate.filter_by_year_and_class(filter_records, 2000, "A")
    assert [r.year for r in subset] == [2010]


def test_filter_all_classes(filter_records):
    subset = aggregate.filter_by_year_and_class(filter_records, 1999, "All")
    assert [r.year for r in subset] == [1999, 2000, 2010]


def test_filter_can_be_empty(filter_records):
    assert aggregate.filter_by_year_and_class(filter_records, 2011, "All") == []


def test_extents_and_classes(filter_records):
    assert aggregate.year_extent(filter_records) == (1900, 2010)
    assert aggregate.year_extent([]) is None
    assert aggregate.max_mass(filter_records) == 50.0
    assert aggregate.max_mass([]) is None
    assert aggregate.distinct_classes(filter_records) == ["A", "B"]
