"""
numshift - Shift the numeric part of NUMBER.EXTENSION filenames
"""

__version__ = "1.0.0"
