from __future__ import annotations

import pytest

from core.models import CropRegion, CropState
from core.services.crop_service import CropRegionTracker


def test_starts_idle() -> None:
    tracker = CropRegionTracker()

    assert tracker.state is CropState.IDLE
    assert tracker.region is None


def test_press_move_release_cycle() -> None:
    tracker = CropRegionTracker()

    tracker.begin(150, 150)
    assert tracker.state is CropState.ACTIVE
    assert tracker.region == CropRegion(150, 150, 100)

    assert tracker.move(200, 180) is True
    assert tracker.region == CropRegion(200, 180, 100)

    assert tracker.finish() is True
    assert tracker.state is CropState.IDLE
    assert tracker.region is None


def test_move_while_idle_is_ignored() -> None:
    tracker = CropRegionTracker()

    assert tracker.move(10, 10) is False
    assert tracker.region is None


def test_finish_while_idle_reports_nothing_to_do() -> None:
    assert CropRegionTracker().finish() is False


def test_custom_radius() -> None:
    tracker = CropRegionTracker(radius=40)
    tracker.begin(0, 0)

    assert tracker.region.radius == 40


def test_invalid_radius() -> None:
    with pytest.raises(ValueError):
        CropRegionTracker(radius=0)


def test_region_bounds() -> None:
    region = CropRegion(150, 150, 100)

    assert region.diameter == 200
    assert region.bounds == (50, 50, 200, 200)
