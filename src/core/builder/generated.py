"""
Генерация builder'ов по описанию модели

builder_for() создаёт класс builder'а с отдельным fluent setter'ом на каждый
атрибут модели, имя setter'а совпадает с именем атрибута:

    BookBuilder = builder_for(Book)
    book = BookBuilder.create().title("Pedro Páramo").pages(128).build()

staged_builder: декоратор модели, который делает то же самое и добавляет
Model.builder() / Model.Builder.
"""

from typing import Any, Callable, Final, Literal

from pydantic import BaseModel

from src.core.builder.mirrored import MirroredBuilder
from src.core.builder.staged import BuilderConfig, StagedBuilder
from src.core.builder.wrapped import WrappedBuilder

Variant = Literal["mirrored", "wrapped"]

VARIANTS: Final[dict[str, type[StagedBuilder]]] = {
    "mirrored": MirroredBuilder,
    "wrapped": WrappedBuilder,
}


def _reserved_names() -> frozenset[str]:
    names: set[str] = set()
    for base in VARIANTS.values():
        for klass in base.__mro__:
            names.update(vars(klass))
            # Объявленные атрибуты класса и экземпляра (target, config, ...)
            names.update(vars(klass).get("__annotations__", {}))
    return frozenset(names)


def _make_setter(name: str) -> Callable[..., Any]:
    def setter(self, value):
        return self.with_attribute(name, value)

    setter.__name__ = name
    setter.__qualname__ = name
    setter.__doc__ = f"Установка атрибута {name!r}. Возвращает тот же builder."
    return setter


def builder_for(
    target: type[BaseModel],
    *,
    variant: Variant = "mirrored",
    config: BuilderConfig | None = None,
) -> type[StagedBuilder]:
    """
    Создание класса builder'а для модели.

    Args:
        target: Pydantic модель
        variant: "mirrored" (staging-dict) или "wrapped" (удерживаемый экземпляр)
        config: default конфигурация для экземпляров builder'а

    Returns:
        Подкласс MirroredBuilder / WrappedBuilder с setter'ом на каждый атрибут

    Raises:
        ValueError: неизвестный variant
        TypeError: имя атрибута совпадает с API builder'а,
                   или wrapped вариант для модели с обязательными атрибутами
    """
    if variant not in VARIANTS:
        raise ValueError(f"Unknown builder variant {variant!r}, expected one of {sorted(VARIANTS)}")

    reserved = _reserved_names()
    clashes = sorted(name for name in target.model_fields if name in reserved)
    if clashes:
        raise TypeError(
            f"Cannot generate builder for {target.__name__}: attributes "
            f"{', '.join(clashes)} clash with the builder API"
        )

    namespace: dict[str, Any] = {
        "target": target,
        "__module__": target.__module__,
        "__doc__": f"Сгенерированный builder для {target.__name__}.",
    }
    if config is not None:
        namespace["default_config"] = config
    for name in target.model_fields:
        namespace[name] = _make_setter(name)

    base = VARIANTS[variant]
    return type(base)(f"{target.__name__}Builder", (base,), namespace)


def staged_builder(
    variant: Variant = "mirrored",
    config: BuilderConfig | None = None,
) -> Callable[[type[BaseModel]], type[BaseModel]]:
    """
    Декоратор модели: генерирует builder и добавляет Model.Builder и Model.builder().

    Пример:
        @staged_builder()
        class Book(BaseModel):
            title: str = ""

        Book.builder().title("Pedro Páramo").build()
    """

    def decorate(target: type[BaseModel]) -> type[BaseModel]:
        generated = builder_for(target, variant=variant, config=config)
        target.Builder = generated
        target.builder = classmethod(lambda cls: generated.create())
        return target

    return decorate
