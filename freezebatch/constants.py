# freezebatch/constants.py
# Conversion factors, bottle sizes and freeze thresholds

ML_PER_OZ = 29.5735

# Bottle and pour sizes (ml)
STANDARD_BOTTLE_ML = 750
SERVING_SIZE_ML = 90  # ~3oz per serving

# ABV thresholds (%)
FREEZE_THRESHOLD = 15   # Below this = solid freeze
SLUSHY_THRESHOLD = 22   # Below this = slushy (22%+ is safe)

# Dilution water as % of the bottle (20 stirred, 25 shaken)
DEFAULT_DILUTION_PERCENT = 20

# Jigger markings are in quarter-ounce increments
QUARTER_OZ_STEPS = 4
