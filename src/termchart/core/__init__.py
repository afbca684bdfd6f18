"""Shared geometry and compositing primitives used by every chart type."""

from __future__ import annotations

from termchart.core.ansi import COLORS, bg, fg
from termchart.core.cursor import BlockKind, Canvas, flatten, place_block
from termchart.core.disk import DiskRasterizer, assign_slice, slice_ratios
from termchart.core.scale import NiceDomain, ValueScaler, nice_domain, scale
from termchart.core.text import pad_mid, visible_length

__all__ = [
    "COLORS",
    "BlockKind",
    "Canvas",
    "DiskRasterizer",
    "NiceDomain",
    "ValueScaler",
    "assign_slice",
    "bg",
    "fg",
    "flatten",
    "nice_domain",
    "pad_mid",
    "place_block",
    "scale",
    "slice_ratios",
    "visible_length",
]
