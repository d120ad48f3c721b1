"""
Frontend Theme Management.

Page configuration and the stylesheet for the threshold cards.
"""
import logging
from pathlib import Path
from typing import Optional

import streamlit as st
from lact8.config import Config

logger = logging.getLogger(__name__)

class ThemeManager:
    """Applies page settings and injects style.css."""

    @staticmethod
    def css_markup(css_file: Optional[str] = None) -> str:
        """<style> block with the stylesheet, or "" if it cannot be read."""
        path = Path(css_file or Config.CSS_FILE)
        try:
            css = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Stylesheet {path} not loaded, cards use default styling: {e}")
            return ""
        return f"<style>{css}</style>"

    @staticmethod
    def apply() -> None:
        """Set the page config and inject the stylesheet (call once, first)."""
        st.set_page_config(
            page_title=Config.APP_TITLE,
            layout=Config.APP_LAYOUT,
            page_icon=Config.APP_ICON,
        )
        markup = ThemeManager.css_markup()
        if markup:
            st.markdown(markup, unsafe_allow_html=True)
