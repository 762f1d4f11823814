"""Top languages SVG card for GitHub profiles."""

from .aggregator import aggregate
from .card import TopLanguagesCard, build_response
from .renderer import language_color, render

__all__ = ["aggregate", "render", "language_color", "TopLanguagesCard", "build_response"]
