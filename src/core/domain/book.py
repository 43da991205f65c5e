"""
Book — Модель книги в каталоге книжного магазина

Immutable Pydantic модель. Объекты создаются через BookBuilder
(Book.builder()), который позволяет задать любое подмножество атрибутов
без перегрузок конструктора на каждую комбинацию.

Незаданные атрибуты получают default: пустая строка, 0 страниц, цена не задана.
"""

from pydantic import BaseModel, Field

from src.core.builder.mirrored import MirroredBuilder
from src.core.domain.money import Money


# =============================================================================
# BOOK MODEL
# =============================================================================


class Book(BaseModel):
    """
    Модель книги.

    Immutable модель (frozen=True). Точка входа для создания: Book.builder().
    """

    title: str = Field("", description="Название")
    author: str = Field("", description="Автор")
    pages: int = Field(0, description="Количество страниц")
    price: Money | None = Field(None, description="Цена, если задана")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def builder(cls) -> "BookBuilder":
        """Новый BookBuilder без заданных атрибутов."""
        return BookBuilder.create()

    def has_price(self) -> bool:
        """
        Проверка, задана ли цена.

        Returns:
            True если price не None
        """
        return self.price is not None


# =============================================================================
# BUILDER
# =============================================================================


class BookBuilder(MirroredBuilder[Book]):
    """Builder книги: собственная staging-область, build() создаёт новый Book."""

    target = Book

    def title(self, title: str) -> "BookBuilder":
        return self.with_attribute("title", title)

    def author(self, author: str) -> "BookBuilder":
        return self.with_attribute("author", author)

    def pages(self, pages: int) -> "BookBuilder":
        return self.with_attribute("pages", pages)

    def price(self, price: Money) -> "BookBuilder":
        """Цена книги (Money или dict с amount/currency)."""
        return self.with_attribute("price", price)
