"""Tests for agency configuration loading."""

from __future__ import annotations

import logging

import pytest

from right_track_db.config import AgencyConfig, RightTrackAgency, load_agency_config
from right_track_db.logging_config import setup_logging
from tests.fakes import InMemoryDB


@pytest.fixture
def agency_yaml(tmp_path):
    path = tmp_path / "agency.yml"
    path.write_text("id: mnr\ndb:\n  location: /data/mnr/database.db\n")
    return path


class TestAgencyConfig:
    def test_from_yaml(self, agency_yaml):
        config = AgencyConfig.from_yaml(agency_yaml)
        assert config.id == "mnr"
        assert config.db.location == "/data/mnr/database.db"

    def test_missing_file_gives_defaults(self, tmp_path, monkeypatch):
        monkeypatch.delenv("RT_AGENCY_ID", raising=False)
        monkeypatch.delenv("RT_AGENCY_DB_LOCATION", raising=False)
        config = AgencyConfig.from_yaml(tmp_path / "missing.yml")
        assert config.id == ""
        assert config.db.location == ""

    def test_env_fills_unset_fields(self, tmp_path, monkeypatch):
        path = tmp_path / "agency.yml"
        path.write_text("id: lirr\n")
        monkeypatch.setenv("RT_AGENCY_DB_LOCATION", "/data/lirr.db")

        config = AgencyConfig.from_yaml(path)

        assert config.id == "lirr"
        assert config.db.location == "/data/lirr.db"

    def test_env_fills_unset_nested_fields(self, tmp_path, monkeypatch):
        path = tmp_path / "agency.yml"
        path.write_text("id: lirr\ndb: {}\n")
        monkeypatch.setenv("RT_AGENCY_DB_LOCATION", "/data/lirr.db")

        config = AgencyConfig.from_yaml(path)

        assert config.db.location == "/data/lirr.db"

    def test_yaml_wins_over_env(self, agency_yaml, monkeypatch):
        monkeypatch.setenv("RT_AGENCY_DB_LOCATION", "/elsewhere.db")
        assert AgencyConfig.from_yaml(agency_yaml).db.location == "/data/mnr/database.db"

    def test_env_only(self, monkeypatch):
        monkeypatch.setenv("RT_AGENCY_ID", "septa")
        assert AgencyConfig().id == "septa"

    def test_load_agency_config_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_agency_config(path) == {}


class TestRightTrackAgency:
    def test_from_yaml(self, agency_yaml):
        agency = RightTrackAgency.from_yaml(agency_yaml)
        assert agency.get_config().id == "mnr"

    def test_no_config(self):
        assert RightTrackAgency().get_config() is None

    def test_drives_handle_construction(self, agency_yaml):
        db = InMemoryDB.from_agency(RightTrackAgency.from_yaml(agency_yaml))
        assert db.id == "mnr"
        assert db.location == "/data/mnr/database.db"


class TestSetupLogging:
    def test_idempotent(self):
        logger = setup_logging("debug")
        handlers = len(logger.handlers)
        assert setup_logging(logging.INFO) is logger
        assert len(logger.handlers) == handlers
        assert logger.level == logging.INFO

    def test_handler_is_named(self):
        logger = setup_logging()
        names = [h.get_name() for h in logger.handlers]
        assert names.count("right_track_db") == 1
