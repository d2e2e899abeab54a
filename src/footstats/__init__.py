"""Batch statistics pipeline for football player datasets."""

__version__ = "0.1.0"
