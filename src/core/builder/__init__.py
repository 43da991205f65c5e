"""
Builder — поэтапное построение immutable value objects.

Два структурных варианта с общим контрактом (create / setters / build):
- MirroredBuilder: собственная staging-область, build() вызывает конструктор модели
- WrappedBuilder: builder удерживает экземпляр модели и возвращает его из build()

builder_for / staged_builder генерируют builder по описанию модели.
"""

from src.core.builder.generated import builder_for, staged_builder
from src.core.builder.mirrored import MirroredBuilder
from src.core.builder.staged import (
    BuilderConfig,
    BuilderConsumedError,
    BuilderError,
    MissingRequiredAttributeError,
    StagedBuilder,
    UnknownAttributeError,
)
from src.core.builder.wrapped import WrappedBuilder

__all__ = [
    # Base
    "StagedBuilder",
    "BuilderConfig",
    # Variants
    "MirroredBuilder",
    "WrappedBuilder",
    # Generation
    "builder_for",
    "staged_builder",
    # Errors
    "BuilderError",
    "UnknownAttributeError",
    "MissingRequiredAttributeError",
    "BuilderConsumedError",
]
