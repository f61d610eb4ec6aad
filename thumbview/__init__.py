"""Thumb outline engine: rounded rectangle with a circular extrusion on its top edge."""

from .engine import (
    Bounds, StyleParameters, OutlineAnchors,
    clamp_style, compute_anchors, build_path, build_path_cached,
)
