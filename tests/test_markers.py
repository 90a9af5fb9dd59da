import pytest

from drivers.markers import JitterGenerator, generate_markers
from drivers.models import Driver, DriverMarker
from estimation.models import EstimateSource, FareEstimate


def test_same_seed_same_positions(catalog, rider):
    first = generate_markers(catalog, rider, JitterGenerator(seed=42))
    second = generate_markers(catalog, rider, JitterGenerator(seed=42))

    assert [m.location for m in first] == [m.location for m in second]


def test_different_seeds_move_drivers(catalog, rider):
    first = generate_markers(catalog, rider, JitterGenerator(seed=1))
    second = generate_markers(catalog, rider, JitterGenerator(seed=2))

    assert [m.location for m in first] != [m.location for m in second]


def test_offsets_stay_within_half_a_hundredth_of_a_degree(rider):
    drivers = [Driver(i, "Driver", str(i)) for i in range(200)]

    markers = generate_markers(drivers, rider, JitterGenerator(seed=3))

    for marker in markers:
        assert abs(marker.location[0] - rider[0]) <= 0.005
        assert abs(marker.location[1] - rider[1]) <= 0.005


def test_markers_follow_catalog_order_and_start_unpriced(catalog, rider):
    markers = generate_markers(catalog, rider, JitterGenerator(seed=5))

    assert [m.id for m in markers] == [d.id for d in catalog]
    assert all(m.time is None and m.price is None for m in markers)


def test_zero_spread_puts_everyone_on_the_rider(catalog, rider):
    markers = generate_markers(catalog, rider, JitterGenerator(seed=5, spread=0.0))

    assert all(m.location == rider for m in markers)


def test_negative_spread_is_rejected():
    with pytest.raises(ValueError):
        JitterGenerator(spread=-0.01)


def test_title_is_full_name():
    assert Driver(1, "Sarah", "Moyo").title == "Sarah Moyo"


def test_time_and_price_are_set_together(rider):
    marker = DriverMarker(Driver(1, "Sarah", "Moyo"), rider)

    priced = marker.with_estimate(FareEstimate(15.0, "7.50", EstimateSource.ROUTED))

    assert priced.has_estimate
    assert (priced.time, priced.price) == (15.0, "7.50")
    assert not marker.has_estimate
    assert not priced.without_estimate().has_estimate


@pytest.mark.parametrize("time_minutes, price", [(15.0, None), (None, "7.50")])
def test_half_annotated_marker_is_rejected(rider, time_minutes, price):
    with pytest.raises(ValueError):
        DriverMarker(Driver(1, "Sarah", "Moyo"), rider, time=time_minutes, price=price)
