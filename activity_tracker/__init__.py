"""Activity Tracker - coding activity charts and profile README publishing"""

from __future__ import annotations

__version__ = "0.1.0"
