"""Sales Reports — monthly transaction listing and analytics over MongoDB."""

__version__ = "1.0.0"
