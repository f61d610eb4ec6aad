"""SVG serialisation for path descriptions."""
import math
from .types import PathDescription, LineSeg
from .geometry import arc_sweep, arc_start_point, arc_end_point, dist


def _xy(p) -> str:
    return f"{p[0]:.2f},{p[1]:.2f}"


def _arc_cmd(r: float, sweep: float, to) -> str:
    large = 1 if abs(sweep) > math.pi else 0
    flag = 1 if sweep > 0 else 0
    return f"A{r:.2f},{r:.2f} 0 {large} {flag} {_xy(to)}"


def path_d(path: PathDescription) -> str:
    """SVG path data for a closed outline.

    SVG shares the y-down convention, so clockwise arcs use sweep-flag 1.
    Every arc is preceded by a line to its start point.
    """
    cmds = [f"M{_xy(path.start)}"]
    pen = path.start
    for seg in path.segments:
        if isinstance(seg, LineSeg):
            cmds.append(f"L{_xy(seg.to)}")
            pen = seg.to
            continue
        a_start = arc_start_point(seg)
        if dist(pen, a_start) > 1e-9:
            cmds.append(f"L{_xy(a_start)}")
        sweep = arc_sweep(seg)
        if sweep == 0 or seg.radius == 0:
            pen = a_start
            continue
        pen = arc_end_point(seg)
        cmds.append(_arc_cmd(seg.radius, sweep, pen))
    cmds.append("Z")
    return " ".join(cmds)


def render_path_svg(path: PathDescription, width: float, height: float) -> str:
    """Standalone SVG document: fill the outline, then stroke it."""
    d = path_d(path)
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:g}" height="{height:g}"'
           f' viewBox="0 0 {width:g} {height:g}">']
    out.append(f'<path d="{d}" fill="{path.fill_color}" stroke="none"/>')
    out.append(f'<path d="{d}" fill="none" stroke="{path.stroke_color}"'
               f' stroke-width="{path.stroke_width:g}" stroke-linejoin="round"/>')
    out.append('</svg>')
    return "\n".join(out)
