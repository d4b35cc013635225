"""
Tests for the market-indicators command-line interface.

Run with:
    python -m pytest tests/test_cli.py -v
"""

import io
import json

import pytest

from rich.console import Console

from market_indicators.cli import create_parser, handle_request, main, render_profile, serve
from market_indicators.tools import build_default_registry


def bars_payload(num_bins: int | None = 2) -> dict:
    """Arguments for 20 bars of [8, 10] with volume 100."""
    payload = {"high": [10.0] * 20, "low": [8.0] * 20, "volume": [100.0] * 20}
    if num_bins is not None:
        payload["numBins"] = num_bins
    return payload


def extreme_payload() -> dict:
    """Bars whose price range overflows a float bin width."""
    return {"high": [1e308] * 20, "low": [-1e308] * 20, "volume": [1.0] * 20, "numBins": 1}


@pytest.fixture
def no_env(tmp_path) -> list[str]:
    """Global options pointing at an env file that does not exist."""
    return ["--env-file", str(tmp_path / "none.env")]


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self) -> None:
        """Test a subcommand must be given."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_call_defaults_to_stdin(self) -> None:
        """Test call reads stdin unless --input is given."""
        args = create_parser().parse_args(["call", "calculate_volume_profile"])

        assert args.input == "-"
        assert not args.table


class TestListCommand:
    """Tests for the list command."""

    def test_lists_tools(self, no_env: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        """Test every built-in tool is listed."""
        assert main([*no_env, "list"]) == 0

        out = capsys.readouterr().out
        for name in ("calculate_sma", "calculate_macd", "calculate_atr", "calculate_volume_profile"):
            assert name in out


class TestCallCommand:
    """Tests for the call command."""

    def test_call_from_file(
        self, no_env: list[str], tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test arguments are read from a JSON file and the result printed as JSON."""
        input_file = tmp_path / "bars.json"
        input_file.write_text(json.dumps(bars_payload()))

        rc = main([*no_env, "call", "calculate_volume_profile", "--input", str(input_file)])

        assert rc == 0
        result = json.loads(capsys.readouterr().out)
        assert result["pointOfControl"] == 8.5
        assert result["valueAreaLow"] == 8.0
        assert result["valueAreaHigh"] == 9.0

    def test_call_from_stdin(
        self,
        no_env: list[str],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test arguments are read from stdin by default."""
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(bars_payload(num_bins=None))))

        rc = main([*no_env, "call", "calculate_volume_profile"])

        assert rc == 0
        result = json.loads(capsys.readouterr().out)
        assert len(result["bins"]) == 10

    def test_table_output(
        self, no_env: list[str], tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test --table renders the profile with POC and value area summary."""
        input_file = tmp_path / "bars.json"
        input_file.write_text(json.dumps(bars_payload()))

        rc = main(
            [*no_env, "call", "calculate_volume_profile", "--input", str(input_file), "--table"]
        )

        assert rc == 0
        out = capsys.readouterr().out
        assert "Volume Profile" in out
        assert "POC: 8.5" in out
        assert "Value Area: 8 - 9" in out

    def test_indicator_error(
        self, no_env: list[str], tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test indicator failures are reported verbatim with exit status 1."""
        input_file = tmp_path / "bars.json"
        input_file.write_text(json.dumps(bars_payload(num_bins=0)))

        rc = main([*no_env, "call", "calculate_volume_profile", "--input", str(input_file)])

        assert rc == 1
        assert "Error: Invalid numBins: 0" in capsys.readouterr().err

    def test_unknown_tool(
        self,
        no_env: list[str],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test unknown tool names fail with exit status 1."""
        monkeypatch.setattr("sys.stdin", io.StringIO("{}"))

        rc = main([*no_env, "call", "calculate_bbands"])

        assert rc == 1
        assert "Unknown tool 'calculate_bbands'" in capsys.readouterr().err

    def test_invalid_json(
        self,
        no_env: list[str],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test malformed input fails with exit status 1."""
        monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2"))

        rc = main([*no_env, "call", "calculate_volume_profile"])

        assert rc == 1
        assert "Invalid JSON input" in capsys.readouterr().err

    def test_missing_input_file(
        self, no_env: list[str], tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a missing input file fails with exit status 1."""
        rc = main(
            [*no_env, "call", "calculate_volume_profile", "--input", str(tmp_path / "nope.json")]
        )

        assert rc == 1
        assert "Error:" in capsys.readouterr().err

    def test_call_period_tool(
        self,
        no_env: list[str],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test a period-based tool runs through the same call path."""
        monkeypatch.setattr("sys.stdin", io.StringIO('{"values": [1, 2, 3, 4], "period": 2}'))

        rc = main([*no_env, "call", "calculate_sma"])

        assert rc == 0
        assert json.loads(capsys.readouterr().out) == {"sma": [1.5, 2.5, 3.5]}

    def test_non_finite_result(
        self, no_env: list[str], tmp_path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a result that overflows to infinity is reported instead of printed."""
        input_file = tmp_path / "bars.json"
        input_file.write_text(json.dumps(extreme_payload()))

        rc = main([*no_env, "call", "calculate_volume_profile", "--input", str(input_file)])

        captured = capsys.readouterr()
        assert rc == 1
        assert "Infinity" not in captured.out
        assert "not representable as JSON" in captured.err

    def test_invalid_settings(
        self,
        no_env: list[str],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test bad environment settings stop the CLI before running a tool."""
        monkeypatch.setenv("INDICATORS_DEFAULT_NUM_BINS", "many")

        rc = main([*no_env, "list"])

        assert rc == 1
        assert "INDICATORS_DEFAULT_NUM_BINS" in capsys.readouterr().err


class TestRenderProfile:
    """Tests for the --table renderer."""

    def test_markers(self) -> None:
        """Test the POC bin and the other value area bins are marked."""
        arguments = {
            "high": [0.5, 1.8, 2.8, 4.0] * 5,
            "low": [0.0, 1.2, 2.2, 3.5] * 5,
            "volume": [10.0, 20.0, 30.0, 40.0] * 5,
            "numBins": 4,
        }
        result = build_default_registry().call("calculate_volume_profile", arguments)
        out = io.StringIO()

        render_profile(result, Console(file=out, width=200))

        lines = out.getvalue().splitlines()
        poc_rows = [line for line in lines if "POC" in line and "POC:" not in line]
        va_rows = [line for line in lines if "VA" in line]
        assert len(poc_rows) == 1
        assert len(va_rows) == 1
        # Highest price first: the [3, 4] POC bin sits above the [2, 3] bin
        assert lines.index(poc_rows[0]) < lines.index(va_rows[0])
        assert "POC: 3.5   Value Area: 2 - 4" in out.getvalue()


class TestServe:
    """Tests for the line-delimited JSON server."""

    def test_handle_request_result(self) -> None:
        """Test a valid request returns the tool result with its id."""
        registry = build_default_registry()
        line = json.dumps({"id": 7, "tool": "calculate_volume_profile", "arguments": bars_payload()})

        response = handle_request(registry, line)

        assert response["id"] == 7
        assert response["result"]["pointOfControl"] == 8.5
        assert "error" not in response

    def test_handle_request_indicator_error(self) -> None:
        """Test indicator errors are returned in the error field."""
        registry = build_default_registry()
        payload = bars_payload()
        payload["low"] = payload["low"][:10]
        line = json.dumps({"id": "a", "tool": "calculate_volume_profile", "arguments": payload})

        response = handle_request(registry, line)

        assert response == {
            "id": "a",
            "error": (
                "Not enough data for volume profile analysis after aligning array lengths "
                "(need 20, got 10)"
            ),
        }

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("not json", "Invalid JSON request"),
            ("[1, 2]", "Request must be a JSON object"),
            ('{"id": 1}', "missing the 'tool' name"),
            ('{"id": 1, "tool": "calculate_volume_profile", "arguments": [1]}', "must be a JSON object"),
            ('{"id": 1, "tool": "nope"}', "Unknown tool 'nope'"),
        ],
    )
    def test_handle_request_bad_requests(self, line: str, expected: str) -> None:
        """Test malformed requests are answered with an error."""
        response = handle_request(build_default_registry(), line)

        assert expected in response["error"]

    def test_serve_non_finite_result(self) -> None:
        """Test an overflowing result is answered with a strict-JSON error line."""
        registry = build_default_registry()
        request = json.dumps(
            {"id": 9, "tool": "calculate_volume_profile", "arguments": extreme_payload()}
        )
        stdout = io.StringIO()

        serve(registry, io.StringIO(request + "\n"), stdout)

        line = stdout.getvalue().strip()
        assert "Infinity" not in line
        response = json.loads(line)
        assert response["id"] == 9
        assert "not representable as JSON" in response["error"]

    def test_handle_request_rejects_nan_literal(self) -> None:
        """Test NaN and Infinity literals are not accepted as JSON."""
        response = handle_request(build_default_registry(), '{"id": NaN, "tool": "calculate_sma"}')

        assert response["id"] is None
        assert "Invalid JSON request" in response["error"]

    def test_serve_loop(self) -> None:
        """Test one response line per non-blank request line."""
        registry = build_default_registry()
        requests = "\n".join(
            [
                json.dumps({"id": 1, "tool": "calculate_volume_profile", "arguments": bars_payload()}),
                "",
                "garbage",
                json.dumps({"id": 3, "tool": "calculate_volume_profile", "arguments": {}}),
            ]
        )
        stdout = io.StringIO()

        serve(registry, io.StringIO(requests + "\n"), stdout)

        responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert len(responses) == 3
        assert responses[0]["result"]["pointOfControl"] == 8.5
        assert "Invalid JSON request" in responses[1]["error"]
        assert responses[2]["id"] == 3
        assert "Invalid arguments for calculate_volume_profile" in responses[2]["error"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
