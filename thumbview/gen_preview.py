"""Generate SVG previews of the thumb outline for a set of preset styles.

Reference host renderer: fills the outline, strokes it, and marks the
view bounds and the thumb center for inspection.
"""
import os

from pathgeom.geometry import path_polygon, poly_area
from pathgeom.svg import path_d
from thumbview.engine import Bounds, StyleParameters, build_path, compute_anchors
from thumbview.constants import PREVIEW_WIDTH, PREVIEW_HEIGHT, ARC_SAMPLES

_BOUNDS = Bounds(PREVIEW_WIDTH, PREVIEW_HEIGHT)

PRESETS: dict[str, tuple[Bounds, StyleParameters]] = {
    "default":      (_BOUNDS, StyleParameters()),
    "half_thumb":   (_BOUNDS, StyleParameters(thumb_circle_offset=-30.0)),
    "rounded":      (_BOUNDS, StyleParameters(thumb_circle_offset=-12.0, corner_radius=16.0)),
    "offset_thumb": (_BOUNDS, StyleParameters(thumb_circle_offset=-20.0, corner_radius=8.0,
                                              circle_x_offset=-70.0)),
    "heavy_stroke": (_BOUNDS, StyleParameters(thumb_radius=40.0, thumb_circle_offset=-28.0,
                                              corner_radius=12.0, stroke_width=6.0,
                                              width_inset=3.0, height_inset=3.0,
                                              fill_color="#e3f2fd", stroke_color="#1a237e")),
    "no_thumb":     (_BOUNDS, StyleParameters(thumb_radius=0.0, corner_radius=20.0, y_offset=0.0)),
}


def render_preview_svg(bounds: Bounds, style: StyleParameters, title: str = "") -> tuple[str, float]:
    """SVG text for one outline plus the enclosed area (square points)."""
    path = build_path(bounds, style)
    anchors = compute_anchors(bounds, style)
    area = poly_area(path_polygon(path, ARC_SAMPLES))
    w, h = bounds
    d = path_d(path)

    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{w:g}" height="{h:g}"'
           f' viewBox="0 0 {w:g} {h:g}">']
    if title:
        out.append(f'<title>{title}</title>')
    # view bounds
    out.append(f'<rect x="0" y="0" width="{w:g}" height="{h:g}" fill="none"'
               f' stroke="#bbb" stroke-width="0.5" stroke-dasharray="4,3"/>')
    out.append(f'<path d="{d}" fill="{path.fill_color}" stroke="none"/>')
    out.append(f'<path d="{d}" fill="none" stroke="{path.stroke_color}"'
               f' stroke-width="{path.stroke_width:g}" stroke-linejoin="round"/>')
    # thumb center mark
    cx, cy = anchors.thumb_center
    out.append(f'<line x1="{cx-4:.1f}" y1="{cy:.1f}" x2="{cx+4:.1f}" y2="{cy:.1f}"'
               f' stroke="#c62828" stroke-width="0.7"/>')
    out.append(f'<line x1="{cx:.1f}" y1="{cy-4:.1f}" x2="{cx:.1f}" y2="{cy+4:.1f}"'
               f' stroke="#c62828" stroke-width="0.7"/>')
    out.append(f'<text x="{w/2:.1f}" y="{h-8:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="9" fill="#999">{area:.1f} sq pt</text>')
    out.append('</svg>')
    return "\n".join(out), area


def write_previews(out_dir: str) -> list[tuple[str, float]]:
    """Write one SVG per preset into out_dir. Returns (path, area) pairs."""
    os.makedirs(out_dir, exist_ok=True)
    written = []
    for name, (bounds, style) in PRESETS.items():
        svg, area = render_preview_svg(bounds, style, title=name)
        svg_path = os.path.join(out_dir, f"{name}.svg")
        with open(svg_path, "w") as f:
            f.write(svg)
        written.append((svg_path, area))
    return written


# ============================================================
# Main entry point
# ============================================================

if __name__ == "__main__":
    out_dir = os.path.join(os.getcwd(), "previews")
    for svg_path, area in write_previews(out_dir):
        print(f"  {os.path.basename(svg_path):<18s} {area:10.1f} sq pt")
    print(f"Previews written to {out_dir}")
