"""Renderers — one rendering algorithm per numeral system kind.

Renderers assume a validated value and never re-check the domain.
"""

from .additive import render_additive
from .bijective import render_bijective
from .delegated import render_chinese
from .fixed import render_non_zeroable_fixed, render_zeroable_fixed
from .positional import render_positional
from .symbolic import render_symbolic

__all__ = [
    "render_additive",
    "render_bijective",
    "render_chinese",
    "render_non_zeroable_fixed",
    "render_positional",
    "render_symbolic",
    "render_zeroable_fixed",
]
