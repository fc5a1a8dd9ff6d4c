"""Tests for the command-line driver."""

import pandas as pd
import pytest

from lpssim.cli import build_parser, main


class TestParser:
    """Tests for build_parser."""

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.servers == 2
        assert args.jobs == 10_000_000
        assert args.seed == 0
        assert args.dist == "hyperexp:1,1,1"
        assert args.rho is None

    def test_repeated_rho(self):
        args = build_parser().parse_args(["--rho", "0.2", "--rho", "0.4"])

        assert args.rho == [0.2, 0.4]


class TestMain:
    """Tests for main."""

    def test_prints_header_then_one_line_per_rho(self, capsys):
        code = main(["--servers", "1", "--jobs", "300", "--seed", "1", "--dist", "exp",
                     "--rho", "0.3", "--rho", "0.6"])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[0] == "num_jobs 300 num_servers 1 seed 1 dist exp:1.0"
        assert [line.split(";")[0] for line in lines[1:]] == ["0.3", "0.6"]
        assert all(line.endswith(";") for line in lines[1:])

    def test_writes_csv(self, test_output_dir):
        path = test_output_dir / "sweep.csv"

        main(["--servers", "2", "--jobs", "200", "--rho", "0.5", "--csv", str(path)])

        frame = pd.read_csv(path)
        assert frame["rho"].tolist() == [0.5]
        assert frame["mean_response_time"].iloc[0] > 0

    def test_unnormalized_distribution_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--jobs", "10", "--rho", "0.5", "--dist", "exp:2"])

        assert excinfo.value.code == 2
        captured = capsys.readouterr()
        assert "normalized" in captured.err
        assert captured.out == ""

    def test_bad_rho_exits_before_any_result(self, capsys):
        """A bad value late in the rho list stops the sweep before the first run."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--servers", "1", "--jobs", "50", "--dist", "exp", "--rho", "0.5", "--rho", "inf"])

        assert excinfo.value.code == 2
        captured = capsys.readouterr()
        assert "finite" in captured.err
        assert captured.out == ""

    def test_bad_distribution_text_exits(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--jobs", "10", "--rho", "0.5", "--dist", "lognormal"])

        assert excinfo.value.code == 2
        assert "unknown distribution" in capsys.readouterr().err

    def test_log_level_enables_stderr_logging(self, capsys):
        main(["--servers", "1", "--jobs", "50", "--rho", "0.5", "--log-level", "INFO"])

        assert "mean_response" in capsys.readouterr().err
