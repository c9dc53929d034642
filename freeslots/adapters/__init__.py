"""
Adapters layer - Upstream free/busy payload parsing.
"""

from .payload import decode_body, extract_raw_busy, parse_busy_intervals

__all__ = ["decode_body", "extract_raw_busy", "parse_busy_intervals"]
