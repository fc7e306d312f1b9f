"""Tests for the command line entry point."""

import numpy as np
import pytest
from PIL import Image

import draw
from utils import circle_array, circle_text


class TestMain:

	def test_default_text(self, capsys):
		assert draw.main([]) == 0
		assert capsys.readouterr().out == circle_text(3)

	def test_radius_flag(self, capsys):
		draw.main(["-r", "8"])
		assert capsys.readouterr().out == circle_text(8)

	def test_radius_zero(self, capsys):
		draw.main(["-r", "0"])
		assert capsys.readouterr().out == "#\n"

	@pytest.mark.parametrize("value", ["-2", "abc"])
	def test_invalid_radius(self, value, capsys):
		with pytest.raises(SystemExit) as exc:
			draw.main(["-r", value])
		assert exc.value.code == 2

	def test_png_file(self, tmp_path, capsys):
		out = tmp_path / "circle.png"
		draw.main(["-r", "5", "-png", str(out)])
		assert capsys.readouterr().out == ""
		assert (np.array(Image.open(out)) == circle_array(5)).all()

	def test_plot_file(self, tmp_path):
		out = tmp_path / "plot.png"
		draw.main(["-r", "5", "-plot", str(out)])
		assert out.exists()

	def test_bench(self, capsys):
		draw.main(["-r", "10", "-bench", "2"])
		out = capsys.readouterr().out
		assert out.startswith("sqrt:")
		assert "int:" in out

	def test_bench_needs_rounds(self):
		with pytest.raises(SystemExit):
			draw.main(["-bench", "0"])

	def test_http_runs_server(self, monkeypatch):
		calls = []
		monkeypatch.setattr(draw, "serve", calls.append)
		assert draw.main(["-http", ":8080"]) == 0
		assert calls == [":8080"]

	def test_http_bad_address(self):
		with pytest.raises(SystemExit):
			draw.main(["-http", "localhost"])


class TestParseAddress:

	@pytest.mark.parametrize("address, expected", [(":8080", ("0.0.0.0", 8080)), ("localhost:9000", ("localhost", 9000)), ("127.0.0.1:80", ("127.0.0.1", 80)), ("[::1]:8080", ("::1", 8080))])
	def test_parse(self, address, expected):
		assert draw.parse_address(address) == expected
