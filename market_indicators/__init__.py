"""
Market indicators: volume profile analysis exposed as callable tools.
"""

__version__ = "1.0.0"
