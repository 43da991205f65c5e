"""
MirroredBuilder — вариант с собственной staging-областью

Builder хранит staged значения отдельно от целевой модели (dict по имени
атрибута) и передаёт их в валидирующий конструктор модели при build().

Каждый build() создаёт новый независимый объект: повторные вызовы
возвращают равные, но не идентичные объекты.
"""

from typing import Any

from src.core.builder.staged import BuilderConfig, StagedBuilder, TargetT


class MirroredBuilder(StagedBuilder[TargetT]):
    """Builder со staging-dict, материализация через model_validate."""

    def __init__(self, config: BuilderConfig | None = None):
        super().__init__(config)
        self._staged: dict[str, Any] = {}

    def _stage(self, name: str, value: Any) -> None:
        self._staged[name] = value

    def _materialize(self) -> TargetT:
        # Незаданные атрибуты заполняются defaults модели
        return self.target.model_validate(dict(self._staged))
