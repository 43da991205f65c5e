"""
StagedBuilder — Базовый поэтапный builder для immutable value objects

Builder накапливает атрибуты целевого объекта последовательными вызовами
и материализует его по запросу (build). Атрибуты, которые не были заданы,
получают default значения, объявленные в самой модели.

Набор атрибутов builder НЕ дублирует: он читается из model_fields целевой
Pydantic модели: модель является единственным источником описания атрибутов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый setter возвращает тот же builder (fluent chaining)
2. Порядок вызовов setter'ов не влияет на результат build()
3. Повторная установка атрибута перезаписывает значение (last write wins)
4. build() никогда не возвращает None (без атрибутов получаем объект из defaults)
5. Объект, возвращённый build(), не меняется последующими вызовами builder
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Final, Generic, Self, TypeVar, is_typeddict

from pydantic import BaseModel, ConfigDict, TypeAdapter

logger = logging.getLogger(__name__)

TargetT = TypeVar("TargetT", bound=BaseModel)


# =============================================================================
# ERRORS
# =============================================================================


class BuilderError(Exception):
    """Базовая ошибка builder'а"""

    pass


class UnknownAttributeError(BuilderError, AttributeError):
    """Атрибут не объявлен в целевой модели"""

    def __init__(self, target: type[BaseModel], name: str):
        super().__init__(f"{target.__name__} has no attribute {name!r}")
        # AttributeError.__init__ сбрасывает name в None
        self.target = target
        self.name = name


class MissingRequiredAttributeError(BuilderError):
    """
    build() вызван без обязательных атрибутов.

    Возникает только в strict режиме (BuilderConfig.required_attributes).
    """

    def __init__(self, target: type[BaseModel], missing: frozenset[str]):
        self.target = target
        self.missing = missing
        super().__init__(
            f"Cannot build {target.__name__}: missing required attributes "
            f"{', '.join(sorted(missing))}"
        )


class BuilderConsumedError(BuilderError):
    """Повторное использование single-use builder'а после build()"""

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BuilderConfig:
    """Конфигурация builder'а.

    По умолчанию минимальный дизайн: нет обязательных атрибутов,
    build() можно вызывать повторно.
    """

    # Атрибуты, без которых build() запрещён (strict режим)
    required_attributes: frozenset[str] = frozenset()

    # Builder становится непригодным после первого build()
    single_use: bool = False


# =============================================================================
# TYPE VALIDATION
# =============================================================================


# Параметры model_config, влияющие на валидацию отдельного значения
VALIDATION_CONFIG_KEYS: Final[tuple[str, ...]] = (
    "strict",
    "arbitrary_types_allowed",
    "str_strip_whitespace",
    "str_to_lower",
    "str_to_upper",
    "str_min_length",
    "str_max_length",
    "allow_inf_nan",
    "coerce_numbers_to_str",
)

# Кэш адаптеров хранится в самой модели и живёт, пока жива модель
ADAPTER_CACHE_ATTR: Final[str] = "__staged_builder_adapters__"


def _has_own_config(annotation: Any) -> bool:
    """Модели, dataclasses и TypedDict валидируются со своим config."""
    return (
        (isinstance(annotation, type) and issubclass(annotation, BaseModel))
        or dataclasses.is_dataclass(annotation)
        or is_typeddict(annotation)
    )


def _make_adapter(target: type[BaseModel], name: str) -> TypeAdapter:
    field = target.model_fields[name]
    annotation = field.annotation
    if field.metadata:
        annotation = Annotated[(annotation, *field.metadata)]

    config = {
        key: target.model_config[key]
        for key in VALIDATION_CONFIG_KEYS
        if key in target.model_config
    }
    if not config or _has_own_config(field.annotation):
        return TypeAdapter(annotation)
    return TypeAdapter(annotation, config=ConfigDict(**config))


def attribute_adapter(target: type[BaseModel], name: str) -> TypeAdapter:
    """
    TypeAdapter для объявленного поля модели.

    Значение проверяется так же, как его проверила бы сама модель:
    объявленный тип, constraints поля (gt, ge, pattern, strict, ...) и
    параметры валидации из model_config (strict, arbitrary_types_allowed, ...).
    Собственных правил builder не добавляет.

    Адаптеры кэшируются в __dict__ модели (не наследуются подклассами).
    """
    cache = target.__dict__.get(ADAPTER_CACHE_ATTR)
    if cache is None:
        cache = {}
        setattr(target, ADAPTER_CACHE_ATTR, cache)

    if name not in cache:
        cache[name] = _make_adapter(target, name)
    return cache[name]


# =============================================================================
# STAGED BUILDER
# =============================================================================


class StagedBuilder(ABC, Generic[TargetT]):
    """
    Поэтапный builder целевой модели.

    Подклассы задают target и реализуют хранение (_stage) и
    материализацию (_materialize). Проверка имени и типа атрибута,
    strict режим и single-use общие для всех вариантов.
    """

    target: ClassVar[type[BaseModel]]
    default_config: ClassVar[BuilderConfig] = BuilderConfig()
    config: BuilderConfig

    def __init__(self, config: BuilderConfig | None = None):
        """
        Args:
            config: конфигурация builder'а (опционально, используется default_config)
        """
        self.config = config or type(self).default_config
        unknown = self.config.required_attributes - set(self.attribute_names())
        if unknown:
            raise ValueError(
                f"required_attributes not declared on {self.target.__name__}: "
                f"{', '.join(sorted(unknown))}"
            )

        self._staged_names: set[str] = set()
        self._consumed = False

    @classmethod
    def create(cls, config: BuilderConfig | None = None) -> Self:
        """Новый builder, ни один атрибут не задан."""
        return cls(config)

    @classmethod
    def from_target(cls, instance: TargetT, config: BuilderConfig | None = None) -> Self:
        """
        Builder, предзаполненный всеми атрибутами существующего объекта.

        Args:
            instance: объект целевого типа
            config: конфигурация нового builder'а

        Returns:
            Builder, у которого staged все атрибуты instance
        """
        if not isinstance(instance, cls.target):
            raise TypeError(
                f"{cls.__name__}.from_target expects {cls.target.__name__}, "
                f"got {type(instance).__name__}"
            )
        builder = cls(config)
        for name in cls.attribute_names():
            builder.with_attribute(name, getattr(instance, name))
        return builder

    @classmethod
    def attribute_names(cls) -> tuple[str, ...]:
        """Имена атрибутов целевой модели в порядке объявления."""
        return tuple(cls.target.model_fields)

    def with_attribute(self, name: str, value: Any) -> Self:
        """
        Установка атрибута.

        Args:
            name: имя атрибута целевой модели
            value: значение объявленного типа

        Returns:
            Тот же builder (для chaining)

        Raises:
            UnknownAttributeError: атрибут не объявлен в модели
            pydantic.ValidationError: значение не соответствует типу
            BuilderConsumedError: single-use builder уже использован
        """
        self._ensure_usable()
        if name not in self.target.model_fields:
            raise UnknownAttributeError(self.target, name)

        value = attribute_adapter(self.target, name).validate_python(value)
        self._stage(name, value)
        self._staged_names.add(name)

        logger.debug("Staged %s.%s=%r", self.target.__name__, name, value)
        return self

    def staged_attributes(self) -> frozenset[str]:
        """Имена атрибутов, явно заданных через builder."""
        return frozenset(self._staged_names)

    def build(self) -> TargetT:
        """
        Материализация целевого объекта.

        Незаданные атрибуты получают default значения модели.

        Returns:
            Объект целевой модели

        Raises:
            MissingRequiredAttributeError: strict режим, не заданы обязательные атрибуты
            BuilderConsumedError: single-use builder уже использован
        """
        self._ensure_usable()

        missing = self.config.required_attributes - self._staged_names
        if missing:
            raise MissingRequiredAttributeError(self.target, frozenset(missing))

        result = self._materialize()
        if self.config.single_use:
            self._consumed = True

        logger.debug(
            "Built %s with staged attributes %s",
            self.target.__name__,
            sorted(self._staged_names),
        )
        return result

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(
                f"{type(self).__name__} is single-use and has already built "
                f"a {self.target.__name__}"
            )

    @abstractmethod
    def _stage(self, name: str, value: Any) -> None:
        """Сохранение уже провалидированного значения."""
        ...

    @abstractmethod
    def _materialize(self) -> TargetT:
        """Создание целевого объекта из staged значений."""
        ...
