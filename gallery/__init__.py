"""Workflow template gallery service."""

__version__ = "0.1.0"
