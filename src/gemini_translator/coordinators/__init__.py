"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_controller import TranslationController

__all__ = [
    "TranslationController",
]
