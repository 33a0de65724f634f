"""QSS stylesheet and gauge colours for StandTimer."""

from __future__ import annotations

# ── gauge colours ─────────────────────────────────────────────────────────

GAUGE_OK = "#A6E3A1"        # green, plenty of time left
GAUGE_ALERT = "#F38BA8"     # red, time to get up
GAUGE_TRACK = "#6C7086"     # desaturated gray, drawn translucent
GAUGE_PAUSED = "#7A7A9A"    # label colour while switched off

# ── palette ───────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#A6E3A1",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    """Return the application-wide QSS for *palette*."""
    p = dict(PALETTE)
    if palette:
        p.update(palette)
    return f"""
QWidget {{
    background-color: {p['bg']};
    color: {p['text']};
    font-size: 13px;
}}
QFrame#card {{
    background-color: {p['bg_secondary']};
    border: 1px solid {p['border']};
    border-radius: 12px;
}}
QLabel#banner {{
    font-size: 22px;
    color: {p['danger']};
    background: transparent;
}}
QPushButton {{
    background-color: {p['surface']};
    border: 1px solid {p['border']};
    border-radius: 8px;
    padding: 6px 14px;
}}
QPushButton:disabled {{
    color: {p['text_muted']};
}}
QPushButton#primaryButton {{
    background-color: {p['accent']};
    color: {p['bg']};
    font-weight: 600;
}}
QPushButton#primaryButton:disabled {{
    background-color: {p['surface']};
    color: {p['text_muted']};
}}
QPushButton#dangerButton {{
    color: {p['danger']};
}}
QPushButton#toggleButton:checked {{
    background-color: {p['accent']};
    color: {p['bg']};
    font-weight: 700;
}}
QListWidget {{
    background-color: {p['bg']};
    border: 1px solid {p['border']};
    border-radius: 6px;
}}
QComboBox {{
    background-color: {p['surface']};
    border: 1px solid {p['border']};
    border-radius: 6px;
    padding: 4px 8px;
}}
"""
