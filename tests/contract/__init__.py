"""Contract tests shared by every cache store implementation."""
