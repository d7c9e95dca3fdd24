"""
urlshort - a minimal, configuration-driven HTTP redirect server.
"""

__version__ = "1.0.0"
