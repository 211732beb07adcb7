"""Constants shared by the forbid-imports rule, checker and CLI."""

REGISTRY_PREFIX = "forbid-imports."

# Message key into the rule registry (resources/rule_registry.yaml).
MESSAGE_KEY = "forbid.certain.imports"

MESSAGE_CODE = "W9601"
MESSAGE_SYMBOL = "forbid-certain-imports"

# Fallback when the packaged registry cannot be read.
DEFAULT_MESSAGE_TEMPLATE = "Import matching forbidden pattern '%s' in this scope: '%s'."
DEFAULT_DISPLAY_NAME = "Forbidden import in scoped package/class."

# Compiled for an empty package/class scope option.
MATCH_ALL_REGEXP = ".*"

CHECKER_NAME = "forbid-certain-imports"
