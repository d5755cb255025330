# SPDX-License-Identifier: Apache-2.0
"""Tests for CLI argument parsing and commands."""

from __future__ import annotations

import pytest

from typofit.cli import main, parse_args, run


class TestParseArgs:
    """Tests for parse_args function."""

    def test_global_defaults(self) -> None:
        args = parse_args(["estimate", "hello"])
        assert args.command == "estimate"
        assert args.backend == "pdfium"
        assert args.font == "Helvetica"
        assert args.font_size == 12.0
        assert args.verbose is False

    def test_estimate_defaults(self) -> None:
        args = parse_args(["estimate", "hello"])
        assert args.samples == ["M", "n", "."]
        assert args.distribution == [0.06, 0.8, 0.14]

    def test_truncate_options(self) -> None:
        args = parse_args(["truncate", "hello", "-w", "20", "--tail", "...", "--estimate"])
        assert args.width == 20.0
        assert args.tail == "..."
        assert args.estimate is True

    def test_fit_box_options(self) -> None:
        args = parse_args(["fit-box", "--ref", "100", "20", "--box", "50", "10", "--by-width"])
        assert args.ref == [100.0, 20.0]
        assert args.box == [50.0, 10.0]
        assert args.by_width is True
        assert args.ratio == 1.0

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])

    def test_invalid_backend(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--backend", "cairo", "estimate", "x"])


class TestRun:
    """Tests for command execution."""

    def test_fit_box(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run(parse_args(["fit-box", "--ref", "100", "20", "--box", "200", "40"]))
        assert code == 0
        assert capsys.readouterr().out.strip() == "40.00"

    def test_fit_box_zero_extent(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run(parse_args(["fit-box", "--ref", "100", "0", "--box", "200", "40"]))
        assert code == 1
        assert "zero height" in capsys.readouterr().err

    def test_fit_threshold(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args(
            ["fit-threshold", "--threshold", "800", "--value", "400",
             "--size", "16", "--direction", "-1"]
        )
        assert run(args) == 0
        assert capsys.readouterr().out.strip() == "8.00"

    def test_fit_threshold_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args(["fit-threshold", "--threshold", "0", "--value", "1", "--size", "16"])
        assert run(args) == 1
        assert "Error:" in capsys.readouterr().err

    def test_truncate(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args(["truncate", "The quick brown fox", "-w", "40", "--tail", "..."])
        assert run(args) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].endswith("...")
        assert lines[1].startswith("Kept: ")
        assert lines[1].endswith("/19")

    def test_truncate_fits(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args(["truncate", "Hi", "-w", "500", "--estimate"])
        assert run(args) == 0
        assert capsys.readouterr().out.splitlines() == ["Hi", "Kept: 2/2"]

    def test_truncate_negative_width(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args(["truncate", "Hi", "-w", "-5"])
        assert run(args) == 1
        assert "non-negative" in capsys.readouterr().err

    def test_estimate(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(parse_args(["estimate", "Hello world"])) == 0
        out = capsys.readouterr().out
        assert "Average char width:" in out
        assert "Estimated width:" in out
        assert "Measured width:" in out

    def test_estimate_mismatch(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args(["estimate", "x", "--samples", "a", "b", "--distribution", "1"])
        assert run(args) == 1
        assert "Error:" in capsys.readouterr().err

    def test_unknown_font(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = parse_args(["--font", "Nope", "estimate", "x"])
        assert run(args) == 1
        assert "Not a standard PDF font" in capsys.readouterr().err

    def test_pillow_backend(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(parse_args(["--backend", "pillow", "estimate", "abc"])) == 0

    @pytest.mark.parametrize("backend", ["pdfium", "pillow"])
    def test_zero_font_size(
        self, backend: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        args = parse_args(["--backend", backend, "--font-size", "0", "estimate", "x"])
        assert run(args) == 1
        assert "Font size must be positive" in capsys.readouterr().err


class TestMain:
    """Tests for main entry point."""

    def test_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["fit-threshold", "--threshold", "2", "--value", "1", "--size", "10"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == "5.00"
