"""Application ports package."""

from .database import DatabaseEnginePort
from .home_store import HomeStorePort

__all__ = [
    "DatabaseEnginePort",
    "HomeStorePort",
]
