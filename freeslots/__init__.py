"""
freeslots - render the free 30-minute slots of a working day as a sentence.
"""

__version__ = "0.1.0"
