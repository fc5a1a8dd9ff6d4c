"""Tests for simulate() and LimitedProcessorSharing.run()."""

import logging

import pytest

from lpssim import simulate
from lpssim.core import LimitedProcessorSharing, SimulationResult
from lpssim.distributions import Exponential


class TestDeterminism:
    """Identical arguments give identical results."""

    @pytest.mark.parametrize("num_servers", [1, 2, 5])
    def test_repeated_calls_are_identical(self, num_servers, balanced_hyperexponential):
        first = simulate(num_servers, 3_000, balanced_hyperexponential, 0.7, 12345)
        second = simulate(num_servers, 3_000, balanced_hyperexponential, 0.7, 12345)

        assert first == second

    def test_results_compare_equal_despite_wall_time(self, unit_exponential):
        a = LimitedProcessorSharing(2, unit_exponential, 0.6, seed=8).run(2_000)
        b = LimitedProcessorSharing(2, unit_exponential, 0.6, seed=8).run(2_000)

        assert a == b

    def test_different_seeds_give_different_paths(self, unit_exponential):
        a = simulate(1, 2_000, unit_exponential, 0.6, 1)
        b = simulate(1, 2_000, unit_exponential, 0.6, 2)

        assert a != b

    def test_runs_do_not_share_state(self, unit_exponential):
        """An interleaved run does not disturb another run's random stream."""
        expected = simulate(1, 1_000, unit_exponential, 0.5, 77)

        first = LimitedProcessorSharing(1, unit_exponential, 0.5, seed=77)
        other = LimitedProcessorSharing(1, unit_exponential, 0.5, seed=78)
        for _ in range(100):
            first.step()
            other.step()

        assert first.run(1_000).mean_response_time == expected


class TestRunResult:
    """Tests for the SimulationResult returned by run()."""

    def test_counts(self, unit_exponential):
        result = LimitedProcessorSharing(3, unit_exponential, 0.5, seed=2).run(1_000)

        assert isinstance(result, SimulationResult)
        assert result.num_completions == 1_000
        assert result.num_arrivals >= result.num_completions
        assert result.steps >= result.num_arrivals
        assert result.final_clock > 0
        assert result.peak_active >= 1
        assert result.wall_clock_seconds >= 0

    def test_mean_matches_simulate(self, unit_exponential):
        result = LimitedProcessorSharing(2, unit_exponential, 0.4, seed=6).run(1_500)

        assert result.mean_response_time == simulate(2, 1_500, unit_exponential, 0.4, 6)

    def test_single_job_run(self, unit_exponential):
        """num_jobs = 1 stops at the first completion."""
        result = LimitedProcessorSharing(1, unit_exponential, 0.2, seed=0).run(1)

        assert result.num_completions == 1
        assert result.mean_response_time > 0

    def test_mean_response_is_at_least_mean_size_at_light_load(self, unit_exponential):
        """A job can never finish faster than its own size allows."""
        assert simulate(1, 5_000, unit_exponential, 0.05, 3) > 0.9

    def test_debug_logging_reports_run(self, unit_exponential, caplog):
        with caplog.at_level(logging.DEBUG, logger="lpssim"):
            simulate(1, 100, unit_exponential, 0.5, 0)

        messages = [record.message for record in caplog.records]
        assert any(message.startswith("Run starting") for message in messages)
        assert any(message.startswith("Run finished") for message in messages)

    def test_rejects_unnormalized_distribution(self):
        with pytest.raises(ValueError, match="normalized"):
            simulate(2, 100, Exponential(0.5), 0.5, 0)
