"""
Domain models and value objects.

Contains the value objects produced by builders: Money, Book, Person.
"""

from src.core.domain.book import Book, BookBuilder
from src.core.domain.money import Money
from src.core.domain.person import Person, PersonBuilder

__all__ = [
    # Money
    "Money",
    # Book model
    "Book",
    "BookBuilder",
    # Person model
    "Person",
    "PersonBuilder",
]
