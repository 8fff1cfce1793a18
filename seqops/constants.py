"""
Constants shared by the reordering primitives.
"""

# Marker written into consumed slots of a permutation buffer.
SENTINEL = -1

# Precondition validation is stripped when Python runs with -O.
DEBUG_CHECKS = __debug__
