"""Mathematical utilities for pool normalization.

This package provides fixed-point primitives:
- Bfp: 18-decimal fixed-point arithmetic (Balancer-style)
- parse_fixed: exact decimal-string to scaled-integer conversion
"""

from pooldata.math.fixed_point import ONE_18, ONE_36, Bfp, FixedPointParseError, parse_fixed

__all__ = ["Bfp", "FixedPointParseError", "parse_fixed", "ONE_18", "ONE_36"]
