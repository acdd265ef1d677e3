"""
Exit codes for todo-cli.

Semantic exit codes so scripts wrapping the CLI can tell failures apart.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (empty task text, bad position)
ERROR_INVALID_ARGS = 2

# Position does not address a task
ERROR_NOT_FOUND = 5

# Storage file could not be read or written
ERROR_STORAGE = 7

# Storage file exists but its content is malformed
ERROR_PARSE = 8
