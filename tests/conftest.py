"""Shared test fixtures for meteoritestory tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from meteoritestory.model.records import Record, as_dataset  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole run; signals and the canvas need it."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def make_record():
    def _make(name="X", mass=100.0, year=2000, lat=None, lon=None, recclass="L5"):
        return Record(name=name, mass=mass, year=year, lat=lat, lon=lon, recclass=recclass)
    return _make


@pytest.fixture()
def filter_records(make_record):
    """Five records from the explore filter scenario."""
    years = [1900, 1950, 1999, 2000, 2010]
    classes = ["A", "B", "A", "B", "A"]
    return as_dataset(
        make_record(name=f"r{y}", year=y, recclass=c, mass=10.0 * (i + 1))
        for i, (y, c) in enumerate(zip(years, classes))
    )


@pytest.fixture()
def landings(make_record):
    """Twelve geolocated records plus two without a location."""
    records = [
        make_record(name=f"m{i}", mass=float(10 ** (i % 7) + i), year=1800 + 15 * i,
                    lat=-60.0 + 10 * i, lon=-170.0 + 25 * i, recclass="Iron" if i % 2 else "L6")
        for i in range(12)
    ]
    records.append(make_record(name="nowhere-1", mass=5.0e7, year=1920, recclass="Iron"))
    records.append(make_record(name="nowhere-2", mass=3.0, year=2001, recclass="H5"))
    return as_dataset(records)
