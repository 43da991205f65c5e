"""
Тесты для Person и PersonBuilder (wrapped вариант)

Проверяет:
1. Построение персоны с заданными атрибутами
2. Defaults из конструктора без аргументов
3. Повторный build() возвращает тот же объект
4. Отданный объект не меняется последующими setter'ами
5. Бизнес-логика Person (full_name, age_on)
"""

from datetime import date

import pytest
from pydantic import ValidationError

from src.core.builder import WrappedBuilder
from src.core.domain import Person, PersonBuilder


# =============================================================================
# SCENARIOS
# =============================================================================


class TestPersonBuilder:
    """Тесты для PersonBuilder"""

    def test_full_person(self) -> None:
        """Все три атрибута заданы"""
        person = (
            Person.builder()
            .first_name("Leonardo")
            .last_name("Méndez")
            .date_of_birth(date(2015, 12, 4))
            .build()
        )

        assert person.first_name == "Leonardo"
        assert person.last_name == "Méndez"
        assert person.date_of_birth == date(2015, 12, 4)

    def test_date_of_birth_from_iso_string(self) -> None:
        """ISO строка приводится к date"""
        person = Person.builder().date_of_birth("2015-12-04").build()
        assert person.date_of_birth == date(2015, 12, 4)

    def test_empty_builder_gives_default_person(self) -> None:
        person = Person.builder().build()
        assert person == Person()
        assert person.first_name == ""
        assert person.date_of_birth is None

    def test_last_write_wins(self) -> None:
        person = Person.builder().first_name("Leo").first_name("Leonardo").build()
        assert person.first_name == "Leonardo"

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Person.builder().date_of_birth("not a date")


# =============================================================================
# REPEATED BUILD
# =============================================================================


class TestPersonBuilderRepeatedBuild:
    """Повторный build() для wrapped варианта"""

    def test_repeated_build_returns_same_object(self) -> None:
        builder = Person.builder().first_name("Leonardo")
        assert builder.build() is builder.build()

    def test_built_person_unaffected_by_later_sets(self) -> None:
        builder = Person.builder().first_name("Leonardo")
        person = builder.build()

        builder.first_name("Lucía").last_name("Méndez")

        assert person.first_name == "Leonardo"
        assert person.last_name == ""
        rebuilt = builder.build()
        assert rebuilt is not person
        assert rebuilt.full_name() == "Lucía Méndez"


# =============================================================================
# WRAPPED TARGET REQUIREMENTS
# =============================================================================


class TestWrappedTargetRequirements:
    """Wrapped вариант требует default для каждого атрибута"""

    def test_target_without_defaults_rejected(self) -> None:
        from pydantic import BaseModel

        class Passport(BaseModel):
            number: str

            model_config = {"frozen": True}

        with pytest.raises(TypeError) as exc_info:

            class PassportBuilder(WrappedBuilder[Passport]):
                target = Passport

        assert "number" in str(exc_info.value)


# =============================================================================
# PERSON MODEL
# =============================================================================


class TestPerson:
    """Бизнес-логика Person"""

    @pytest.fixture
    def leonardo(self) -> Person:
        return Person(first_name="Leonardo", last_name="Méndez", date_of_birth=date(2015, 12, 4))

    def test_full_name(self, leonardo: Person) -> None:
        assert leonardo.full_name() == "Leonardo Méndez"

    def test_full_name_partial(self) -> None:
        assert Person(last_name="Méndez").full_name() == "Méndez"
        assert Person().full_name() == ""

    def test_age_before_birthday(self, leonardo: Person) -> None:
        assert leonardo.age_on(date(2025, 12, 3)) == 9

    def test_age_on_birthday(self, leonardo: Person) -> None:
        assert leonardo.age_on(date(2025, 12, 4)) == 10

    def test_age_unknown_without_date_of_birth(self) -> None:
        assert Person(first_name="Leonardo").age_on(date(2025, 1, 1)) is None

    def test_person_immutable(self, leonardo: Person) -> None:
        with pytest.raises(ValidationError):
            leonardo.first_name = "Leo"  # type: ignore
