from knitchart.grid.builder import build_row, build_stitches, check_markers, classify_stitch
from knitchart.grid.normalizer import NormalizedGrid, normalize_grid

__all__ = [
    "NormalizedGrid",
    "build_row",
    "build_stitches",
    "check_markers",
    "classify_stitch",
    "normalize_grid",
]
