"""Constants used throughout the application."""

# Environment variable names
ENV_CONFIG_FILE = "BATCH_RENAME_CONFIG"

# Default values
DEFAULT_CONFIG_FILE = "batch-rename.yaml"

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1

# Prompt choices
ITEM_TYPE_CHOICES = ["files", "folders"]
SORT_CHOICES = ["date", "size", "name"]
PATTERN_CHOICES = ["prefix", "suffix", "numbering"]

# Selection input
SELECT_ALL = "all"

# Messages
MSG_NOT_FOUND = "No {item_type} found"
MSG_LIST_ERROR = "Error listing files: {error}"
MSG_PATTERN_MISSING = "Renaming pattern not specified."
MSG_EMPTY_SELECTION = "No items selected"
MSG_SORT_NOT_FOUND = "File not found. Skipping this comparison."
MSG_SORT_ERROR = "Error accessing files: {error}"

# Collision reasons
COLLISION_DUPLICATE = "duplicate target in batch"
COLLISION_EXISTS = "target already exists"

# Term validation
MSG_TERM_SEPARATOR = "term must not contain a path separator"
MSG_TERM_NULL = "term must not contain a null character"
