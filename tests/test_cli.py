"""Tests for the CLI module."""

import pytest

from httop.cli import build_parser, parse_cli, validate_args


@pytest.fixture
def request_file(tmp_path):
    f = tmp_path / "get.httop"
    f.write_text("--method\nGET\n--\n--url\nhttps://example.com\n")
    return str(f)


class TestBuildParser:
    """Tests for the argument parser construction."""

    def test_request_file_positional(self):
        args = build_parser().parse_args(["get.httop"])
        assert args.request_file == "get.httop"

    def test_defaults(self):
        args = build_parser().parse_args(["get.httop"])
        assert args.send is False
        assert args.timeout == 30
        assert args.proxy is None
        assert args.verify is True

    def test_send_options(self):
        args = build_parser().parse_args([
            "get.httop",
            "--send",
            "--timeout", "2.5",
            "--proxy", "http://127.0.0.1:8080",
            "--insecure",
        ])
        assert args.send is True
        assert args.timeout == 2.5
        assert args.proxy == "http://127.0.0.1:8080"
        assert args.verify is False

    def test_missing_request_file(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_non_numeric_timeout(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["get.httop", "--timeout", "soon"])


class TestValidateArgs:
    """Tests for argument validation."""

    def test_nonexistent_file_exits(self, capsys):
        args = build_parser().parse_args(["/nonexistent/file.httop"])
        with pytest.raises(SystemExit):
            validate_args(args)
        assert "Request file not found" in capsys.readouterr().err

    def test_directory_exits(self, tmp_path):
        args = build_parser().parse_args([str(tmp_path)])
        with pytest.raises(SystemExit):
            validate_args(args)

    def test_valid_file_passes(self, request_file):
        args = build_parser().parse_args([request_file])
        # Should not raise
        validate_args(args)

    def test_non_positive_timeout_exits(self, request_file):
        args = build_parser().parse_args([request_file, "--timeout", "0"])
        with pytest.raises(SystemExit):
            validate_args(args)

    @pytest.mark.parametrize("timeout", ["nan", "inf", "-1"])
    def test_non_finite_timeout_exits(self, request_file, timeout, capsys):
        args = build_parser().parse_args([request_file, "--timeout", timeout])
        with pytest.raises(SystemExit):
            validate_args(args)
        assert "Timeout must be a positive number" in capsys.readouterr().err


class TestParseCli:
    """Tests for the full parse_cli flow."""

    def test_full_parse_flow(self, request_file):
        args = parse_cli([request_file, "--send"])
        assert args.request_file == request_file
        assert args.send is True

    def test_invalid_file_exits(self):
        with pytest.raises(SystemExit):
            parse_cli(["/nonexistent/file.httop"])
