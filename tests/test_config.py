"""Tests for SimulationConfig."""

import pytest

from lifeterm.config import SimulationConfig


class TestSimulationConfig:
    """Test cases for run parameters."""

    def test_defaults(self):
        """Test defaults match the classic 40x40, 500ms setup."""
        config = SimulationConfig()
        assert (config.rows, config.columns) == (40, 40)
        assert config.interval == 0.5
        assert config.probability == 0.2
        assert config.seed is None
        assert config.generations is None
        assert config.validate() == []

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"rows": 0}, "Rows must be positive"),
            ({"columns": -2}, "Columns must be positive"),
            ({"interval": -0.1}, "Interval must not be negative"),
            ({"probability": 1.2}, "Population rate must be between 0.0 and 1.0"),
            ({"generations": -1}, "Generations must not be negative"),
        ],
    )
    def test_validate(self, overrides, message):
        """Test each invalid field is reported."""
        assert SimulationConfig(**overrides).validate() == [message]

    def test_validate_collects_all_errors(self):
        """Test several errors are reported together."""
        errors = SimulationConfig(rows=0, columns=0).validate()
        assert len(errors) == 2

    def test_seeded_rng_is_reproducible(self):
        """Test the same seed yields the same draws."""
        first = SimulationConfig(seed=5).make_rng().random(4)
        second = SimulationConfig(seed=5).make_rng().random(4)
        assert first.tolist() == second.tolist()
