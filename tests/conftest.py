"""Root conftest — shared test configuration."""

import os

# Ensure tests never point at a real database
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/catalog_test")
os.environ.setdefault("LOG_FORMAT", "text")
