"""Vocabulary selection and dictionary definition cache."""

__version__ = "0.1.0"
