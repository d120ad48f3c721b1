"""
Lactate Threshold Constants Module

Fixed criteria for LT1/LT2 detection.
"""

# Minimum number of valid steps: baseline + LT1 + LT2 candidate + peak
MIN_VALID_STEPS = 4

# Rise between neighbouring steps that counts as a lactate increase [mmol/L].
# Compared with a strict ">", so a rise of exactly 0.3 does not count.
LACTATE_RISE_THRESHOLD = 0.3

# Differences are rounded before comparing so decimal readings compare as
# entered (1.3 - 1.0 is 0.30000000000000004 in floating point).
RISE_DECIMALS = 9

# Plausible blood lactate range [mmol/L]
LACTATE_RANGE = (0.0, 30.0)
