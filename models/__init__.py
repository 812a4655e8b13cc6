"""
Unified models library for FruitFall.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Vector2D, Resolution, Rectangle)
- FruitFall: Game-specific enums and the HUD snapshot

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models.fruitfall import HudData, HazardType
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Resolution,
    Rectangle,
)

# ============================================================================
# FruitFall models
# ============================================================================
from .fruitfall import (
    InputAction,
    HazardType,
    HudData,
)

__all__ = [
    # Primitives
    "Point2D",
    "Vector2D",
    "Resolution",
    "Rectangle",
    # FruitFall
    "InputAction",
    "HazardType",
    "HudData",
]
