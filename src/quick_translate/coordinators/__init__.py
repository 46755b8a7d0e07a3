"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translator_form_coordinator import TranslatorFormCoordinator

__all__ = ["TranslatorFormCoordinator"]
