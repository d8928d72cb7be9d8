"""
UI Theme configuration: colors and icons for console messages.
"""

from typing import Dict

THEME: Dict[str, str] = {
    "text": "#e6edf3",  # Main text
    "muted": "#7d8590",  # Muted text
    "error": "#f85149",  # Error red
    "warning": "#d29922",  # Warning yellow
    "success": "#00ff88",  # Bright green
}

ICONS: Dict[str, str] = {
    "success": "✓",
    "error": "✗",
    "warning": "⚠",
    "pending": "⟳",
}
