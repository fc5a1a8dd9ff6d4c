"""Tests for SweepConfig and the default tables."""

import math

import numpy as np
import pytest

from lpssim.config import (
    BALANCED_HYPEREXP,
    DEFAULT_DISTRIBUTION,
    DEFAULT_RHOS,
    SweepConfig,
)
from lpssim.distributions import Exponential, Hyperexponential, parse_distribution


class TestDefaults:
    """Tests for the built-in parameter tables."""

    def test_rho_table_is_increasing_and_stable(self):
        assert list(DEFAULT_RHOS) == sorted(DEFAULT_RHOS)
        assert len(set(DEFAULT_RHOS)) == len(DEFAULT_RHOS)
        assert 0 < DEFAULT_RHOS[0] and DEFAULT_RHOS[-1] < 1

    def test_rho_table_size(self):
        assert len(DEFAULT_RHOS) == 52

    @pytest.mark.parametrize("text", [DEFAULT_DISTRIBUTION, BALANCED_HYPEREXP])
    def test_named_distributions_are_normalized(self, text):
        assert abs(parse_distribution(text).mean() - 1.0) < 1e-8

    def test_default_config(self):
        config = SweepConfig()

        assert config.num_servers == 2
        assert config.num_jobs == 10_000_000
        assert config.seed == 0
        assert config.dist == Hyperexponential(1.0, 1.0, 1.0)
        assert config.rhos == DEFAULT_RHOS


class TestValidate:
    """Tests for SweepConfig.validate."""

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"num_servers": 0}, "num_servers"),
            ({"num_jobs": 0}, "num_jobs"),
            ({"rhos": ()}, "at least one rho"),
            ({"rhos": (0.5, 0.0)}, "positive"),
            ({"rhos": (-0.1,)}, "positive"),
            ({"rhos": (0.5, math.inf)}, "finite"),
            ({"seed": -1}, "seed"),
            ({"num_jobs": 1.5}, "num_jobs"),
            ({"dist": Exponential(2.0)}, "normalized"),
            ({"dist": Hyperexponential(2.0, 0.5, 0.2)}, "normalized"),
        ],
    )
    def test_rejects_invalid_settings(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            SweepConfig(**kwargs).validate()

    def test_accepts_valid_settings(self):
        SweepConfig(num_servers=1, num_jobs=10, rhos=(0.5,)).validate()

    def test_accepts_numpy_integers(self):
        SweepConfig(num_servers=np.int64(2), num_jobs=np.int64(10), seed=np.uint32(5), rhos=(0.5,)).validate()


class TestFromArgs:
    """Tests for SweepConfig.from_args."""

    def test_builds_config(self):
        config = SweepConfig.from_args(num_servers=3, num_jobs=100, seed=7, dist="exp", rhos=[0.2, 0.4])

        assert config == SweepConfig(
            num_servers=3, num_jobs=100, seed=7, dist=Exponential(1.0), rhos=(0.2, 0.4)
        )

    def test_missing_rhos_use_default_table(self):
        assert SweepConfig.from_args(rhos=None).rhos == DEFAULT_RHOS

    def test_invalid_distribution_text(self):
        with pytest.raises(ValueError, match="unknown distribution"):
            SweepConfig.from_args(dist="weibull:2")

    def test_validates(self):
        with pytest.raises(ValueError, match="num_jobs"):
            SweepConfig.from_args(num_jobs=0)
