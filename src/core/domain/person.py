"""
Person — Модель персональной записи

Immutable Pydantic модель. Объекты создаются через PersonBuilder
(Person.builder()). PersonBuilder оборачивает экземпляр Person с момента
своего создания, поэтому у всех атрибутов Person есть default.
"""

from datetime import date

from pydantic import BaseModel, Field

from src.core.builder.wrapped import WrappedBuilder


# =============================================================================
# PERSON MODEL
# =============================================================================


class Person(BaseModel):
    """
    Модель персоны.

    Immutable модель (frozen=True). Точка входа для создания: Person.builder().
    """

    first_name: str = Field("", description="Имя")
    last_name: str = Field("", description="Фамилия")
    date_of_birth: date | None = Field(None, description="Дата рождения, если известна")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def builder(cls) -> "PersonBuilder":
        """Новый PersonBuilder, оборачивающий Person из defaults."""
        return PersonBuilder.create()

    def full_name(self) -> str:
        """
        Полное имя.

        Returns:
            "first_name last_name" без лишних пробелов, если часть не задана
        """
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def age_on(self, day: date) -> int | None:
        """
        Возраст в полных годах на указанную дату.

        Args:
            day: дата, на которую считается возраст

        Returns:
            Полных лет, или None если дата рождения не задана
        """
        if self.date_of_birth is None:
            return None

        dob = self.date_of_birth
        had_birthday = (day.month, day.day) >= (dob.month, dob.day)
        return day.year - dob.year - (0 if had_birthday else 1)


# =============================================================================
# BUILDER
# =============================================================================


class PersonBuilder(WrappedBuilder[Person]):
    """Builder персоны: удерживает экземпляр Person, build() возвращает его."""

    target = Person

    def first_name(self, first_name: str) -> "PersonBuilder":
        return self.with_attribute("first_name", first_name)

    def last_name(self, last_name: str) -> "PersonBuilder":
        return self.with_attribute("last_name", last_name)

    def date_of_birth(self, date_of_birth: date) -> "PersonBuilder":
        return self.with_attribute("date_of_birth", date_of_birth)
