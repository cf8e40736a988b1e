"""Test data generation, party addressing, JSON and line-file helpers for PIR service tests."""

__version__ = "0.1.0"
__all__ = ["datagen", "fileutil", "jsonutil", "parties"]