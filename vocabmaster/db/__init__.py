"""Declarative base, engine and session factory."""

from .base import Base, metadata
from .session import SessionLocal, engine

__all__ = ["Base", "SessionLocal", "engine", "metadata"]
