"""Shared fixtures for database handle tests."""

from __future__ import annotations

import pytest

from right_track_db.config import AgencyConfig, AgencyDatabaseConfig, RightTrackAgency
from tests.fakes import InMemoryDB


@pytest.fixture
def agency_config(tmp_path) -> AgencyConfig:
    return AgencyConfig(
        id="mnr",
        db=AgencyDatabaseConfig(location=str(tmp_path / "mnr" / "database.db")),
    )


@pytest.fixture
def agency(agency_config) -> RightTrackAgency:
    return RightTrackAgency(agency_config)


@pytest.fixture
def db(agency) -> InMemoryDB:
    return InMemoryDB.from_agency(agency)
