"""
CLI tests
"""

import numpy as np
import pytest

import AreaScale
from pixscale import RasterImage, resample
from pixscale.main import main, parse_args, target_size, validate_args
from pixscale.utils import load_image, save_image


@pytest.fixture
def input_png(tmp_path):
    """4x4 PNG with four uniform quadrants"""
    arr = np.zeros((4, 4, 4), dtype=np.uint8)
    arr[:2, :2] = (10, 0, 0, 255)
    arr[:2, 2:] = (20, 0, 0, 255)
    arr[2:, :2] = (30, 0, 0, 255)
    arr[2:, 2:] = (40, 0, 0, 255)
    path = tmp_path / "in.png"
    save_image(RasterImage.from_array(arr), path)
    return path


class TestMain:
    """End-to-end CLI runs"""

    def test_width_and_height(self, input_png, tmp_path):
        out = tmp_path / "out.png"
        assert main(["-i", str(input_png), "-o", str(out), "--width", "2", "--height", "2"]) == 0
        result = load_image(out)
        assert result.to_array()[:, :, 0].tolist() == [[10, 20], [30, 40]]

    def test_width_only_keeps_aspect(self, input_png, tmp_path):
        out = tmp_path / "out.png"
        assert main(["-i", str(input_png), "-o", str(out), "--width", "1", "--method", "loop"]) == 0
        assert load_image(out).pixel(0, 0) == (25, 0, 0, 255)

    def test_scale(self, input_png, tmp_path):
        out = tmp_path / "out.png"
        assert main(["-i", str(input_png), "-o", str(out), "--scale", "2"]) == 0
        assert load_image(out).size == (8, 8)

    def test_fit(self, input_png, tmp_path):
        out = tmp_path / "out.png"
        assert main(["-i", str(input_png), "-o", str(out), "--fit", "2x3"]) == 0
        assert load_image(out).size == (2, 2)

    def test_strict_failure_returns_one(self, input_png, tmp_path):
        out = tmp_path / "out.png"
        code = main(["-i", str(input_png), "-o", str(out), "--width", "6", "--height", "6", "--strict"])
        assert code == 1
        assert not out.exists()

    def test_missing_size(self, input_png, tmp_path, capsys):
        assert main(["-i", str(input_png), "-o", str(tmp_path / "o.png")]) == 2
        assert "Argument error" in capsys.readouterr().out

    def test_conflicting_modes(self, input_png, tmp_path):
        argv = ["-i", str(input_png), "-o", str(tmp_path / "o.png"), "--width", "2", "--scale", "0.5"]
        assert main(argv) == 2

    @pytest.mark.parametrize("scale", ["nan", "inf", "0"])
    def test_non_finite_scale_is_argument_error(self, input_png, tmp_path, capsys, scale):
        argv = ["-i", str(input_png), "-o", str(tmp_path / "o.png"), "--scale", scale]
        assert main(argv) == 2
        assert "Argument error" in capsys.readouterr().out

    def test_missing_input(self, tmp_path):
        argv = ["-i", str(tmp_path / "nope.png"), "-o", str(tmp_path / "o.png"), "--width", "2"]
        assert main(argv) == 2


class TestArgs:
    """Argument parsing helpers"""

    def test_fit_parsing(self, input_png):
        ns = parse_args(["-i", str(input_png), "-o", "x.png", "--fit", "800X600"])
        assert ns.fit == (800, 600)

    def test_bad_fit(self):
        with pytest.raises(SystemExit):
            parse_args(["-i", "a.png", "-o", "b.png", "--fit", "800"])

    def test_zero_width_rejected(self, input_png):
        ns = parse_args(["-i", str(input_png), "-o", "x.png", "--width", "0"])
        with pytest.raises(ValueError, match="--width"):
            validate_args(ns)

    @pytest.mark.parametrize(
        "width,height,expected",
        [
            (2, 3, (2, 3)),
            (50, None, (50, 25)),
            (None, 10, (20, 10)),
            (1, None, (1, 1)),
        ],
    )
    def test_target_size(self, width, height, expected):
        assert target_size(width, height, 100, 50) == expected


def test_alias_package_exports():
    assert AreaScale.resample is resample
    assert AreaScale.RasterImage is RasterImage
