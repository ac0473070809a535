"""Test the configuration module functionality."""

import pytest

from wirecross.config import TRACER_CONFIG, TracerConfig
from wirecross.tracer import closest_crossing_distance


def test_tracer_config_defaults():
    """Test that the default configuration values are correct."""
    config = TracerConfig()

    assert config.separator == ","
    assert config.no_crossing_distance == 0


def test_tracer_config_split():
    config = TracerConfig()

    assert config.split("R5,U2") == ["R5", "U2"]
    assert config.split(" R5 , ,U2,") == ["R5", "U2"]
    assert config.split("") == []


def test_global_config_instance():
    """Test that the global TRACER_CONFIG instance is used by default."""
    assert TRACER_CONFIG.separator == ","
    assert closest_crossing_distance("R5", "L5") == TRACER_CONFIG.no_crossing_distance


def test_custom_config():
    config = TracerConfig(separator="|", no_crossing_distance=42)

    assert config.split("R1|U1") == ["R1", "U1"]
    assert closest_crossing_distance("R1|U1", "U1|R1", config) == 2
    assert closest_crossing_distance("R1", "L1", config) == 42


def test_empty_separator_rejected():
    with pytest.raises(ValueError, match="separator"):
        TracerConfig(separator="")
