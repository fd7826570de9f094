"""Tests for the grid to world centroid transform."""

import pytest

from dogm_eval.data import GridSample
from dogm_eval.evaluation import compute_cluster_centroid


def test_single_sample_flips_y_axis(sample):
    centroid = compute_cluster_centroid([sample], resolution=1.0, grid_size=100.0)

    assert centroid.x == pytest.approx(10.0)
    assert centroid.y == pytest.approx(90.0)
    assert centroid.v_x == pytest.approx(1.0)
    assert centroid.v_y == pytest.approx(0.0)


def test_mean_is_scaled_by_resolution():
    cluster = [
        GridSample(x=10.0, y=20.0, mean_x_vel=2.0, mean_y_vel=4.0),
        GridSample(x=30.0, y=40.0, mean_x_vel=4.0, mean_y_vel=8.0),
    ]

    centroid = compute_cluster_centroid(cluster, resolution=0.5, grid_size=50.0)

    assert centroid.x == pytest.approx(10.0)
    # mean y 30 -> 15 world units from the top
    assert centroid.y == pytest.approx(35.0)
    assert centroid.v_x == pytest.approx(1.5)
    assert centroid.v_y == pytest.approx(-3.0)


def test_downward_grid_velocity_points_down_in_world():
    cluster = [GridSample(x=0.0, y=0.0, mean_x_vel=-1.0, mean_y_vel=2.0)]

    centroid = compute_cluster_centroid(cluster, resolution=1.0, grid_size=10.0)

    assert centroid.v_x == pytest.approx(-1.0)
    assert centroid.v_y == pytest.approx(-2.0)
    assert centroid.y == pytest.approx(10.0)


def test_empty_cluster_raises():
    with pytest.raises(ValueError):
        compute_cluster_centroid([], resolution=1.0, grid_size=100.0)
