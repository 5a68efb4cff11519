"""
Shared pytest configuration.
Keeps the app's file logging out of the working tree during test runs.
"""
import os

os.environ.setdefault("LOG_DIR", "")
