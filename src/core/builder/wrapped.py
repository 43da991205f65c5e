"""
WrappedBuilder — вариант, оборачивающий экземпляр целевой модели

Builder с момента создания держит экземпляр целевой модели, созданный
конструктором без аргументов (все атрибуты в defaults). Поэтому каждый
атрибут целевой модели ОБЯЗАН иметь default; это проверяется при объявлении
подкласса builder'а.

Модель immutable (frozen=True), поэтому установка атрибута заменяет
удерживаемый экземпляр новым, созданным валидирующим конструктором
модели из текущих атрибутов и нового значения. Удерживаемый экземпляр
всегда валиден, как и объект mirrored варианта после build().
Объект, уже отданный через build(), никогда не изменяется.

build() возвращает удерживаемый экземпляр: повторные build() без
промежуточных setter'ов возвращают тот же самый объект.
"""

from typing import Any

from src.core.builder.staged import BuilderConfig, StagedBuilder, TargetT


class WrappedBuilder(StagedBuilder[TargetT]):
    """Builder, удерживающий экземпляр целевой модели."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        target = cls.__dict__.get("target")
        if target is None:
            return

        for name, field in target.model_fields.items():
            if field.is_required():
                raise TypeError(
                    f"{cls.__name__} cannot wrap {target.__name__}: attribute "
                    f"{name!r} has no default (no-argument construction required)"
                )

    def __init__(self, config: BuilderConfig | None = None):
        super().__init__(config)
        self._instance: TargetT = self.target()

    def _stage(self, name: str, value: Any) -> None:
        self._instance = self.target.model_validate({**dict(self._instance), name: value})

    def _materialize(self) -> TargetT:
        return self._instance
