"""Quote of the day.

The pick for a date is ``checksum % len(quotes)`` where the checksum is the
plain sum of year, month and day, so a date always shows the same quote.
``content_shuffle`` adds a random offset for a one-off reshuffle.
"""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from lifeboard.dates import date_key
from lifeboard.models import Quote

T = TypeVar("T")

SHUFFLE_RANGE = 1000

QUOTES = (
    Quote("The only way to do great work is to love what you do.", "Steve Jobs", "motivation"),
    Quote("Life is what happens to you while you're busy making other plans.", "John Lennon", "life"),
    Quote("The future belongs to those who believe in the beauty of their dreams.", "Eleanor Roosevelt", "dreams"),
    Quote("In the midst of winter, I found there was, within me, an invincible summer.", "Albert Camus", "resilience"),
    Quote("Be yourself; everyone else is already taken.", "Oscar Wilde", "authenticity"),
    Quote("Two things are infinite: the universe and human stupidity; and I'm not sure about the universe.", "Albert Einstein", "wisdom"),
    Quote("The unexamined life is not worth living.", "Socrates", "philosophy"),
    Quote("I think, therefore I am.", "René Descartes", "philosophy"),
    Quote("The only true wisdom is in knowing you know nothing.", "Socrates", "wisdom"),
    Quote("Happiness is not something ready made. It comes from your own actions.", "Dalai Lama", "happiness"),
    Quote("The way to get started is to quit talking and begin doing.", "Walt Disney", "action"),
    Quote("Innovation distinguishes between a leader and a follower.", "Steve Jobs", "innovation"),
    Quote("Life is 10% what happens to you and 90% how you react to it.", "Charles R. Swindoll", "mindset"),
    Quote("The mind is everything. What you think you become.", "Buddha", "mindfulness"),
    Quote("Yesterday is history, tomorrow is a mystery, today is a gift.", "Eleanor Roosevelt", "present"),
    Quote("It is during our darkest moments that we must focus to see the light.", "Aristotle", "hope"),
    Quote("The only person you are destined to become is the person you decide to be.", "Ralph Waldo Emerson", "self-determination"),
    Quote("Go confidently in the direction of your dreams. Live the life you have imagined.", "Henry David Thoreau", "dreams"),
    Quote("Success is not final, failure is not fatal: it is the courage to continue that counts.", "Winston Churchill", "perseverance"),
    Quote("The greatest glory in living lies not in never falling, but in rising every time we fall.", "Nelson Mandela", "resilience"),
    Quote("What lies behind us and what lies before us are tiny matters compared to what lies within us.", "Ralph Waldo Emerson", "inner-strength"),
    Quote("Be the change that you wish to see in the world.", "Mahatma Gandhi", "change"),
    Quote("In three words I can sum up everything I've learned about life: it goes on.", "Robert Frost", "life"),
    Quote("If you tell the truth, you don't have to remember anything.", "Mark Twain", "honesty"),
    Quote("A friend is someone who knows all about you and still loves you.", "Elbert Hubbard", "friendship"),
    Quote("To live is the rarest thing in the world. Most people just exist.", "Oscar Wilde", "living"),
    Quote("That which does not kill us makes us stronger.", "Friedrich Nietzsche", "strength"),
    Quote("Live as if you were to die tomorrow. Learn as if you were to live forever.", "Mahatma Gandhi", "learning"),
    Quote("Darkness cannot drive out darkness: only light can do that.", "Martin Luther King Jr.", "love"),
    Quote("We accept the love we think we deserve.", "Stephen Chbosky", "self-worth"),
)


def date_checksum(key: str) -> int:
    """Sum of the year, month and day components of a date key."""
    return sum(int(part) for part in date_key(key).split("-"))


def _require_items(items: Sequence[T]) -> None:
    if not items:
        raise ValueError("Content list is empty")


def content_index(key: str, size: int) -> int:
    return date_checksum(key) % size


def content_for_date(key: str, items: Sequence[T] = QUOTES) -> T:
    """The stable item for a date: the same key always yields the same item."""
    _require_items(items)
    return items[content_index(key, len(items))]


def content_shuffle(key: str, items: Sequence[T] = QUOTES, rng: random.Random | None = None) -> T:
    """A reshuffled item for a date. Not reproducible unless *rng* is seeded."""
    _require_items(items)
    offset = (rng or random).randrange(SHUFFLE_RANGE)
    return items[(date_checksum(key) + offset) % len(items)]


def quote_number(key: str, items: Sequence[T] = QUOTES) -> int:
    """1-based position of the date's stable pick, as shown under the quote."""
    _require_items(items)
    return content_index(key, len(items)) + 1
