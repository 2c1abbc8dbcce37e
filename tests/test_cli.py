"""CLI tests using Typer's test runner."""

import json
import math

import pytest
from typer.testing import CliRunner

from mite import __version__
from mite.presentation.cli.main import app

runner = CliRunner()


class TestCommands:
    """Command output"""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_distance(self):
        result = runner.invoke(app, ["distance", "0,0", "3,4"])
        assert result.exit_code == 0
        assert result.output.strip() == "5.0"

    def test_delta(self):
        result = runner.invoke(app, ["delta", "--", "-3,-4", "0,0"])
        assert result.exit_code == 0
        assert "dx=3 dy=4" in result.output

    def test_scale(self):
        result = runner.invoke(app, ["scale", "--", "2,3", "-2"])
        assert result.exit_code == 0
        assert "Point(-4, -6)" in result.output

    def test_divide_json(self):
        result = runner.invoke(app, ["divide", "--json", "6.0,9.0", "2.0"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"x": 3.0, "y": 4.5}

    def test_divide_integer_by_zero(self):
        result = runner.invoke(app, ["divide", "1,2", "0"])
        assert result.exit_code == 1
        assert "division by zero" in result.output

    def test_divide_integer_by_float_zero(self):
        result = runner.invoke(app, ["divide", "1,2", "0.0"])
        assert result.exit_code == 1
        assert "division by zero" in result.output

    def test_divide_float_by_zero_json(self):
        result = runner.invoke(app, ["divide", "--json", "0.0,1.0", "0.0"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert math.isnan(data["x"])
        assert data["y"] == math.inf

    def test_cast(self):
        result = runner.invoke(app, ["cast", "3.7,4.9", "--to", "int"])
        assert result.exit_code == 0
        assert "Point(3, 4)" in result.output

    def test_cast_unknown_type(self):
        result = runner.invoke(app, ["cast", "3.7,4.9", "--to", "complex"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("args,expected", [
        (["translate", "3,4", "1,2"], {"x": 4, "y": 6}),
        (["translate", "--subtract", "5,7", "2,3"], {"x": 3, "y": 4}),
    ])
    def test_translate(self, args, expected):
        result = runner.invoke(app, [*args, "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == expected

    def test_malformed_point(self):
        result = runner.invoke(app, ["distance", "0,0", "three,4"])
        assert result.exit_code == 2
