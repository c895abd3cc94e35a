#!/usr/bin/env python3
"""
Tests for the global configuration.
"""

import sys
import os
from types import SimpleNamespace

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mazepath import config
from mazepath.graph.constants import MazeGraphDefaults
from mazepath.graph.maze_graph import elevation_edge_weight
from mazepath.graph.priority_queue import MinPQueue


@pytest.fixture(autouse=True)
def reset_config():
    config.maze_config = None
    yield
    config.init_config()


def test_get_config_initializes_defaults():
    settings = config.get_config()
    assert settings is config.get_config()
    assert settings.distance_metric == MazeGraphDefaults.DISTANCE_METRIC
    assert settings.base_weight == MazeGraphDefaults.BASE_WEIGHT
    assert settings.check_invariants is False


def test_from_args_uses_defaults_for_missing_attributes():
    settings = config.MazePathConfig.from_args(SimpleNamespace(climb_factor=3.0))
    assert settings.climb_factor == 3.0
    assert settings.descent_factor == MazeGraphDefaults.DESCENT_FACTOR


def test_unknown_distance_metric_rejected():
    with pytest.raises(ValueError, match="chebyshev"):
        config.init_config(SimpleNamespace(distance_metric="chebyshev"))


def test_weight_factors_drive_default_policy():
    config.init_config(SimpleNamespace(base_weight=2.0, climb_factor=0.5, descent_factor=0.0))
    assert elevation_edge_weight(1.0, 5.0) == 4.0
    assert elevation_edge_weight(5.0, 1.0) == 2.0


def test_queue_picks_up_invariant_checking():
    config.init_config(SimpleNamespace(check_invariants=True))
    assert MinPQueue().check_invariants is True
    assert MinPQueue(check_invariants=False).check_invariants is False
