"""SVG rendering for the top languages card."""

from __future__ import annotations

import hashlib
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from .models import LanguageShare

CARD_WIDTH = 300
HEADER_HEIGHT = 55
ROW_HEIGHT = 40
PADDING = 30
BAR_WIDTH = 205
MAX_WORKERS = 8


def escape_xml(text):
    """Sanitize text for SVG output."""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def language_color(name: str) -> str:
    """Hex color for a language: the first 6 hex digits of its SHA-1 digest."""
    return "#" + hashlib.sha1(name.encode("utf-8")).hexdigest()[:6]


def card_height(row_count: int) -> int:
    # header + rows + bottom padding
    return HEADER_HEIGHT + row_count * ROW_HEIGHT + PADDING


def _assign_colors(names: Sequence[str]) -> list[str]:
    if not names:
        return []
    with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(names))) as executor:
        # map() yields results in submission order
        return list(executor.map(language_color, names))


def _render_row(index: int, share: LanguageShare, color: str) -> str:
    fill_width = BAR_WIDTH * share.value / 100
    return f'''
      <g transform="translate(0, {index * ROW_HEIGHT})">
        <text data-testid="lang-name" x="2" y="15" class="lang-name">{escape_xml(share.name)}</text>
        <text x="215" y="34" class="lang-name">{share.percentage}%</text>
        <rect rx="5" ry="5" x="0" y="25" width="{BAR_WIDTH}" height="8" fill="#ddd" />
        <rect rx="5" ry="5" x="0" y="25" width="{fill_width:.2f}" height="8" fill="{color}" class="lang-progress" />
      </g>'''


def render(ranked: Sequence[LanguageShare], display_count: int) -> str:
    """
    Render ranked language shares as a complete SVG document.

    Args:
        ranked: Shares ordered highest first, as returned by ``aggregate``
        display_count: How many rows to draw; zero or less draws every share

    Returns:
        The SVG markup as text
    """
    shown = list(ranked[:display_count]) if display_count > 0 else list(ranked)
    colors = _assign_colors([share.name for share in shown])

    if shown:
        rows = "".join(_render_row(i, share, color) for i, (share, color) in enumerate(zip(shown, colors)))
    else:
        rows = '\n      <text x="2" y="15" class="lang-name">No language data found.</text>'

    height = card_height(len(shown))
    return f"""<svg
  width="{CARD_WIDTH}"
  height="{height}"
  viewBox="0 0 {CARD_WIDTH} {height}"
  fill="none"
  xmlns="http://www.w3.org/2000/svg"
  role="img"
  aria-labelledby="titleId descId"
>
  <title id="titleId">Top Languages</title>
  <desc id="descId">Top languages by main repo language</desc>
  <style>
    .header {{ font: 600 20px Verdana, Sans-Serif; fill: rgb(3, 38, 83); }}
    @supports(-moz-appearance: auto) {{
      .header {{ font-size: 15.5px; }}
    }}
    .lang-name {{ font: 400 11px Verdana, Sans-Serif; fill: #434d58; }}
  </style>
  <rect data-testid="card-bg" x="0.5" y="0.5" rx="4.5" height="{height - 1}" width="{CARD_WIDTH - 1}" stroke="#e4e2e2" fill="#fffefe" stroke-opacity="1" />
  <g data-testid="card-title" transform="translate(25, 35)">
    <text x="0" y="0" class="header" data-testid="header">Top Languages</text>
  </g>
  <g data-testid="main-card-body" transform="translate(25, {HEADER_HEIGHT})">{rows}
  </g>
</svg>
"""


__all__ = ["escape_xml", "language_color", "card_height", "render"]
