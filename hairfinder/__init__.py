"""
Fulani Hair Finder API

Diagnostic scoring and recommendation backend for the hair-loss quiz funnel.
"""

__version__ = "1.0.0"
