"""Shared test fixtures."""

from __future__ import annotations

import pytest


BASIC_PATH_SVG = '''<svg width="100" height="100" viewBox="0 0 100 100">
  <path d="M10 10 H 90 V 90 H 10 L 10 10" fill="black"/>
</svg>'''

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <circle cx="50" cy="50" r="40" stroke="black" stroke-width="3" fill="red"/>
</svg>'''

RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <rect x="2" y="2" width="20" height="20" fill="#ff0000"/>
</svg>'''

ROUNDED_RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="60" rx="10" fill="blue"/>
</svg>'''

LINE_SVG = '''<svg width="100" height="100" viewBox="0 0 100 100">
  <line x1="10" y1="10" x2="90" y2="90" stroke="red" stroke-width="2"/>
</svg>'''

GRADIENT_SVG = '''<svg width="100" height="100" viewBox="0 0 100 100">
  <defs>
    <linearGradient id="grad1" x1="0%" y1="0%" x2="100%" y2="0%">
      <stop offset="0%" style="stop-color:rgb(255,0,0);stop-opacity:1" />
      <stop offset="100%" style="stop-color:rgb(0,0,255);stop-opacity:1" />
    </linearGradient>
  </defs>
  <path d="M10 10 H 90 V 90 H 10 L 10 10" fill="url(#grad1)"/>
</svg>'''

NAMED_STOP_GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <defs>
    <linearGradient id="grad1">
      <stop offset="0.25" stop-color="red"/>
      <stop offset="0.75" stop-color="blue"/>
    </linearGradient>
  </defs>
  <path d="M0 0 H 100 V 100 H 0 Z" fill="url(#grad1)"/>
</svg>'''

MISSING_GRADIENT_SVG = '''<svg viewBox="0 0 100 100">
  <path d="M10 10 H 90 V 90 H 10 Z" fill="url(#missing)"/>
</svg>'''

RADIAL_GRADIENT_SVG = '''<svg viewBox="0 0 100 100">
  <defs>
    <radialGradient id="glow" cx="50%" cy="50%" r="50%">
      <stop offset="0%" stop-color="white"/>
      <stop offset="100%" stop-color="black"/>
    </radialGradient>
  </defs>
  <circle cx="50" cy="50" r="40" fill="url(#glow)"/>
</svg>'''

SHADOW_CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <defs>
    <filter id="shadow">
      <feDropShadow dx="2" dy="3" stdDeviation="1" flood-color="#000000" flood-opacity="0.5"/>
    </filter>
  </defs>
  <circle cx="50" cy="50" r="40" fill="red" filter="url(#shadow)"/>
</svg>'''

DEFAULT_SHADOW_SVG = '''<svg viewBox="0 0 100 100">
  <defs>
    <filter id="soft"><feDropShadow/></filter>
  </defs>
  <rect x="10" y="10" width="80" height="80" fill="white" filter="url(#soft)"/>
</svg>'''

ROTATED_SVG = '''<svg viewBox="0 0 100 100">
  <rect x="25" y="25" width="50" height="50" fill="green" transform="rotate(45 50 50)"/>
</svg>'''

NESTED_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g transform="rotate(30)">
    <g transform="rotate(15 50 50)">
      <circle cx="50" cy="50" r="10" fill="red"/>
    </g>
    <line x1="0" y1="0" x2="100" y2="100" stroke="black"/>
    <rect x="0" y="0" width="10" height="10"/>
    <path d="M0 0 L 10 10"/>
  </g>
</svg>'''

MIXED_ORDER_SVG = '''<svg viewBox="0 0 100 100">
  <g><path d="M1 1 L 2 2"/></g>
  <line x1="0" y1="0" x2="1" y2="1" stroke="red"/>
  <rect x="0" y="0" width="5" height="5"/>
  <circle cx="5" cy="5" r="5"/>
  <path d="M0 0 L 5 5"/>
</svg>'''

ANIMATED_SVG = '''<svg viewBox="0 0 100 100">
  <animate attributeName="opacity" from="0" to="1" dur="2s" repeatCount="indefinite"/>
  <animateTransform attributeName="transform" type="rotate" from="0 50 50" to="360 50 50" dur="500ms" repeatCount="3"/>
  <circle cx="50" cy="50" r="10"/>
</svg>'''


@pytest.fixture
def svg_file(tmp_path):
    """Write SVG text into tmp_path and return the file path."""

    def _write(text: str, name: str = "icon.svg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
