"""
depstat — module dependency fan-in / fan-out statistics.
"""
__version__ = "0.1.0"
