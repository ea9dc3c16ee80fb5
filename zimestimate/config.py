"""Global configuration: defaults and constants."""

# Wall height above slab, metres
DEFAULT_WALL_HEIGHT_M = 2.7

# Strip footing depth, metres
DEFAULT_FOUNDATION_DEPTH_M = 0.6

DEFAULT_SCOPE = "full_house"
DEFAULT_BRICK_TYPE = "common"
DEFAULT_CEMENT_TYPE = "cement_325"

# Prefix for generated line-item ids: boq_<run stamp>_<n>
ITEM_ID_PREFIX = "boq"

# Used when a price record carries USD only
DEFAULT_EXCHANGE_RATE_ZWG = 30.0

# Sub-folder holding per-project settings
SETTINGS_DIR = ".zimestimate"
