"""
Core package for the severe weather reports dashboard.

Submodules provide source loading, record normalization, filtering,
aggregation, export, and user interface rendering helpers that are
orchestrated by the top-level `app.py`.
"""
