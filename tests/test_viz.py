import math

from somostools.scan.driver import run_somos
from somostools.viz.growth import growth_points, plot_growth


def test_growth_points_skip_zero_and_nan():
    # Somos-1: terms 1, 0, NaN
    pts = growth_points(run_somos(1, 16))
    assert pts == [(0, 0.0)]


def test_growth_points_somos4():
    pts = dict(growth_points(run_somos(4, 12)))
    assert pts[0] == 0.0
    assert math.isclose(pts[7], math.log10(23.0))


def test_plot_growth_saves_png(tmp_path):
    runs = [run_somos(s, 200) for s in (4, 5, 6)]
    path = tmp_path / "g.png"
    data = plot_growth(runs, save_path=str(path))
    assert sorted(data) == [4, 5, 6]
    assert path.exists()
