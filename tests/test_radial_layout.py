import math

import pytest

from dashboard.components.radial_layout import (
    START_ANGLE,
    compute_placements,
    compute_radius,
    connector_for,
    connectors_for,
    layout_angles,
)
from schemas.power_flow import LayoutParameters


def test_zero_count_has_no_placements():
    assert compute_placements(0) == ()
    assert layout_angles(0) == ()


def test_negative_count_is_treated_as_empty():
    assert compute_placements(-3) == ()


@pytest.mark.parametrize("count", [1, 2, 5, 8, 9, 12, 40, 250])
def test_placement_count_and_bounds(count):
    params = LayoutParameters()
    placements = compute_placements(count, params)
    assert len(placements) == count
    assert [p.index for p in placements] == list(range(count))
    lo, hi = 50 - params.max_radius, 50 + params.max_radius
    for p in placements:
        assert lo <= p.x <= hi
        assert lo <= p.y <= hi


def test_single_satellite_sits_on_top():
    params = LayoutParameters()
    radius = compute_radius(1, params)
    (only,) = compute_placements(1, params)
    assert only.angle == START_ANGLE == -math.pi / 2
    assert only.x == pytest.approx(50.0)
    assert only.y == pytest.approx(50.0 - radius)
    assert radius == params.min_radius


def test_four_satellites_go_clockwise_from_top():
    radius = compute_radius(4)
    top, right, bottom, left = compute_placements(4)
    assert (top.x, top.y) == (pytest.approx(50), pytest.approx(50 - radius))
    assert (right.x, right.y) == (pytest.approx(50 + radius), pytest.approx(50))
    assert (bottom.x, bottom.y) == (pytest.approx(50), pytest.approx(50 + radius))
    assert (left.x, left.y) == (pytest.approx(50 - radius), pytest.approx(50))


@pytest.mark.parametrize("count", [1, 3, 7, 12, 33])
def test_angles_are_equally_spaced(count):
    step = 2 * math.pi / count
    angles = layout_angles(count)
    for i, angle in enumerate(angles):
        nxt = angles[(i + 1) % count]
        diff = (nxt - angle - step) % (2 * math.pi)
        assert min(diff, 2 * math.pi - diff) == pytest.approx(0.0, abs=1e-9)


def test_placements_are_pure():
    params = LayoutParameters(min_radius=18, max_radius=48)
    assert compute_placements(17, params) == compute_placements(17, params)


def test_radius_values():
    params = LayoutParameters()
    assert compute_radius(1, params) == pytest.approx(20.0)
    assert compute_radius(8, params) == pytest.approx(20 + math.log10(8) * 12)
    assert compute_radius(12, params) == pytest.approx(20 + math.log10(12) * 12 + 4 * 0.6)
    assert compute_radius(100, params) == 45.0


def test_radius_guard_for_empty_count():
    assert compute_radius(0, LayoutParameters(min_radius=10, max_radius=30)) == 10


def test_radius_is_monotonic_and_capped():
    params = LayoutParameters(min_radius=18, max_radius=48)
    radii = [compute_radius(n, params) for n in range(0, 300)]
    assert all(b >= a for a, b in zip(radii, radii[1:]))
    assert max(radii) <= params.max_radius


def test_min_equal_max_pins_radius():
    params = LayoutParameters(min_radius=30, max_radius=30)
    assert {compute_radius(n, params) for n in (1, 5, 50)} == {30}


def test_layout_parameters_reject_inverted_bounds():
    with pytest.raises(ValueError):
        LayoutParameters(min_radius=50, max_radius=40)
    with pytest.raises(ValueError):
        LayoutParameters(min_radius=-1, max_radius=40)


def test_connectors_start_at_hub():
    placements = compute_placements(6)
    connectors = connectors_for(placements)
    assert len(connectors) == 6
    for placement, connector in zip(placements, connectors):
        assert (connector.x1, connector.y1) == (50, 50)
        assert (connector.x2, connector.y2) == (placement.x, placement.y)
    assert connector_for(placements[0]) == connectors[0]
