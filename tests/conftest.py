"""Shared test fixtures for thumbpath outline tests."""
import pytest
from thumbview.engine import Bounds, StyleParameters, build_path, compute_anchors


@pytest.fixture(scope="session")
def bounds():
    """200 x 100 view."""
    return Bounds(200.0, 100.0)


@pytest.fixture(scope="session")
def thumb_style():
    """Thumb r=20 whose center sits 10 below the top edge; sharp corners."""
    return StyleParameters(thumb_radius=20.0, thumb_circle_offset=-10.0, corner_radius=0.0,
                           y_offset=30.0, width_inset=1.0, height_inset=1.0)


@pytest.fixture(scope="session")
def rounded_style():
    """No thumb, 10-point corners, no insets or y offset."""
    return StyleParameters(thumb_radius=0.0, corner_radius=10.0, y_offset=0.0,
                           width_inset=0.0, height_inset=0.0)


@pytest.fixture(scope="session")
def thumb_path(bounds, thumb_style):
    return build_path(bounds, thumb_style)


@pytest.fixture(scope="session")
def thumb_anchors(bounds, thumb_style):
    return compute_anchors(bounds, thumb_style)


@pytest.fixture(scope="session")
def rounded_path(bounds, rounded_style):
    return build_path(bounds, rounded_style)
