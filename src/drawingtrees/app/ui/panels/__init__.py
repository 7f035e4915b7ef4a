"""
Left-side panels. Each one talks to the global `Store`, never to the view.
"""
from __future__ import annotations

from drawingtrees.app.ui.panels.insert import InsertPanel
from drawingtrees.app.ui.panels.parameters import ParametersPanel

__all__ = ["InsertPanel", "ParametersPanel"]
