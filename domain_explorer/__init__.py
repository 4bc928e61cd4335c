"""
Top-level package for the domain explorer.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    domain_explorer.core
    domain_explorer.services
    domain_explorer.views
    domain_explorer.ui
"""

__all__: list[str] = []
