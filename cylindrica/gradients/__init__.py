"""
Cylindrica Gradients
====================

Faceted gradient synthesis: a base color, a shadow color and a facet
count become a set of shading ramps that make a flat band look like a lit
cylinder, plus hover and press highlights for its controls.

>>> from cylindrica.gradients import synthesize
>>> spec = synthesize("#ff0000", "#000000ff", faces=4)
>>> spec.barrel.colors[:3]
('#000000', '#b40000', '#ff0000')
>>> spec.as_css()["shadow"][:28]
'linear-gradient(0deg, #00000'
"""

from .stops import GradientStop, GradientRamp
from .gradient_spec import GradientSpec, synthesize, sanitize_faces, CSS_NAMES
from .facets import sample_facets

__all__ = [
    "GradientStop",
    "GradientRamp",
    "GradientSpec",
    "synthesize",
    "sanitize_faces",
    "sample_facets",
    "CSS_NAMES",
]
