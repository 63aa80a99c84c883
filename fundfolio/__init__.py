"""
Mutual fund paper trading and portfolio accounting engine.
"""

__version__ = "0.1.0"
