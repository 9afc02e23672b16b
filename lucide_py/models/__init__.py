"""Pydantic models for lucide-py contracts."""

from .base import LucideBaseModel
from .attributes import IconAttributes
from .config import Config
from .icon import GenerationReport, IconComponent, IconSource

__all__ = [
    "Config",
    "LucideBaseModel",
    "IconAttributes",
    "IconSource",
    "IconComponent",
    "GenerationReport",
]
