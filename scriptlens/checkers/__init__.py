"""Semantic checkers, one per supported language."""

from __future__ import annotations

import importlib

from ..language import LanguageConfig
from ._base import BaseChecker
from .bash import BashChecker

# Lazy imports so only the checkers actually requested get loaded
_CHECKER_CLASSES: dict[str, str] = {
    "bash": "bash.BashChecker",
    "java": "java.JavaChecker",
}


def get_checker(config: LanguageConfig) -> BaseChecker:
    """Instantiate the semantic checker for *config*.

    Raises ``ValueError`` if the language has no registered checker.
    """
    spec = _CHECKER_CLASSES.get(config.name)
    if spec is None:
        raise ValueError(f"Unsupported language for semantic checking: {config.name}")
    module_name, class_name = spec.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    return cls(config)


SUPPORTED_CHECKER_LANGUAGES: tuple[str, ...] = tuple(_CHECKER_CLASSES.keys())

__all__ = [
    "BaseChecker",
    "BashChecker",
    "get_checker",
    "SUPPORTED_CHECKER_LANGUAGES",
]
