"""
Shared fixtures for polyline codec tests.
"""
import pytest
import structlog

import sys
sys.path.insert(0, 'src')

from polyline_codec.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against default configuration."""
    for name in ("POLYLINE_DEFAULT_PRECISION", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures logging."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def example_points():
    """Three-point route used by the reference vectors."""
    return [(-120.2, 38.5), (-120.95, 40.7), (-126.453, 43.252)]


@pytest.fixture
def long_polyline():
    """235-character route: 129 scalars, so one trailing unpaired latitude."""
    return (
        "i|~wAeo{aVw@i@SI]EkN^c@@KfXGNULcCo@}HgByEkAcFcAsCk@oAYeAYgZuGiBu@wCi@"
        "iGo@eKBiHx@aGzAeMpEgJ`Dy@wC~@kK|D_A`@yLlEkAXuJhDuAj@yAp@mKzD{h@bRu@NcI"
        "pCmIbDmGxBk@RkD`AgBj@wAf@a@mBe@sCiCiNkCcMgCkMeBZWE}@BmKsAkCWwE]{BGyC?"
        "iBD}BJwCVgDb@mByNu@wSGaC{DL"
    )
