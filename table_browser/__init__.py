"""
Top-level package for the table browser.

This package exposes the core view-derivation logic and the Dash UI that
consumes it. Most code should import from submodules such as:
    table_browser.core
    table_browser.config
    table_browser.ui
"""

__all__: list[str] = []
