"""Project-wide settings and defaults."""

import os

# Store defaults
DEFAULT_DATABASE_NAME = os.environ.get("JSONDB_NAME", "database.json")
DATABASE_SUFFIX = ".json"
JSON_INDENT = 4

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
