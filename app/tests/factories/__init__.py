"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_config,
    make_translation_tree,
    make_translator,
    write_yaml_file,
)

__all__ = [
    "make_config",
    "make_translation_tree",
    "make_translator",
    "write_yaml_file",
]
