"""Constants for sca-report."""

# Exit codes
EXIT_SUCCESS = 0  # No unresolved issues or violations
EXIT_ISSUES = 1  # Unresolved issues or violations found
EXIT_ERROR = 2  # Loading or mapping failed due to error

# Prefix of the text attached to resolved issues and violations
RESOLVED_BY_PREFIX = "\nResolved by: "

# Separator between resolution entries
RESOLUTION_SEPARATOR = ", "

# Separator between a label's grouping prefix and its name
LABEL_PREFIX_SEPARATOR = "."
