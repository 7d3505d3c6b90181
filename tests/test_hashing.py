"""
Unit Tests for Hashing, Settings and Logging Utilities

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import logging

import pytest
from datetime import date
from decimal import Decimal

from core.hashing import calculate_sha256, canonical_json_dumps, verify_hash
from core.settings import get_settings
from modules.simulation.models import Country
from modules.simulation import run_simulation
from utils.logging_config import (
    PerformanceLogger,
    StructuredFormatter,
    get_perf_logger,
    simulation_context,
)


class TestCanonicalJson:
    """Test deterministic serialization."""

    def test_keys_sorted_without_whitespace(self):
        assert canonical_json_dumps({"b": 1, "a": 2}) == '{"a":2,"b":1}'

    def test_decimals_stay_exact(self):
        assert canonical_json_dumps({"total": Decimal("49100.00")}) == '{"total":"49100.00"}'

    def test_dates_and_enums(self):
        dumped = canonical_json_dumps({"as_of": date(2026, 1, 15), "country": Country.FRANCE})
        assert dumped == '{"as_of":"2026-01-15","country":"france"}'

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            canonical_json_dumps({"value": object()})


class TestSha256:
    """Test result fingerprints."""

    def test_prefix_and_length(self):
        digest = calculate_sha256({"a": 1})

        assert digest.startswith("sha256:")
        assert len(digest) == len("sha256:") + 64

    def test_key_order_does_not_matter(self):
        assert calculate_sha256({"a": 1, "b": 2}) == calculate_sha256({"b": 2, "a": 1})

    def test_decimal_scale_matters(self):
        assert calculate_sha256({"v": Decimal("1.0")}) != calculate_sha256({"v": Decimal("1.00")})

    def test_verify_hash(self):
        data = {"total": Decimal("21215.25")}
        digest = calculate_sha256(data)

        assert verify_hash(data, digest)
        assert not verify_hash({"total": Decimal("21215.26")}, digest)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FILE", raising=False)
        monkeypatch.delenv("SIMULATION_SLOW_THRESHOLD_MS", raising=False)

        settings = get_settings()

        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.slow_threshold_ms == 250.0

    def test_environment_overrides(self, monkeypatch, tmp_path):
        log_file = str(tmp_path / "simulation.log")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FILE", log_file)
        monkeypatch.setenv("SIMULATION_SLOW_THRESHOLD_MS", "12.5")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_file == log_file
        assert settings.slow_threshold_ms == 12.5

    def test_empty_log_file_means_none(self, monkeypatch):
        monkeypatch.setenv("LOG_FILE", "")
        assert get_settings().log_file is None


class TestPerformanceLogger:
    """Test timing of operations."""

    def test_slow_operation_warns(self, caplog):
        logger = logging.getLogger("tests.perf.slow")
        logger.propagate = True

        with caplog.at_level(logging.DEBUG, logger="tests.perf.slow"):
            with PerformanceLogger(logger, "run_simulation[test]", threshold_ms=-1) as perf:
                pass

        assert perf.duration_ms is not None
        assert any("SLOW: run_simulation[test]" in r.getMessage() for r in caplog.records)

    def test_threshold_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("SIMULATION_SLOW_THRESHOLD_MS", "999")
        perf = get_perf_logger(logging.getLogger("tests.perf.default"), "noop")

        assert perf.threshold_ms == 999.0


class TestSimulationContext:
    """Test that log records carry the country and operation of the run."""

    def test_context_mapping(self):
        assert simulation_context("france", "achat") == {
            "simulation_context": "{country=france, operation=achat}"
        }

    def test_formatter_appends_context(self):
        record = logging.makeLogRecord({
            "msg": "No calculator",
            "levelname": "INFO",
            **simulation_context("espagne", "achat"),
        })

        line = StructuredFormatter().format(record)
        assert line.endswith("No calculator {country=espagne, operation=achat}")

    def test_formatter_without_context(self):
        line = StructuredFormatter().format(logging.makeLogRecord({"msg": "plain", "levelname": "INFO"}))
        assert line.endswith("] plain")

    def test_engine_records_carry_context(self, caplog, monkeypatch):
        engine_logger = logging.getLogger("modules.simulation.engine")
        monkeypatch.setattr(engine_logger, "propagate", True)

        with caplog.at_level(logging.DEBUG, logger="modules.simulation.engine"):
            run_simulation({
                "country": "espagne",
                "city": "Madrid",
                "operationType": "achat",
                "purchasePrice": 300000,
            }, as_of=date(2026, 1, 1))

        records = [r for r in caplog.records if r.name == "modules.simulation.engine"]
        assert records
        assert all(
            r.simulation_context == "{country=espagne, operation=achat}" for r in records
        )
