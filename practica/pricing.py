"""Book prices with an optional discount, chosen through overriding."""

from dataclasses import dataclass


@dataclass
class Book:
    """A book sold at its list price."""

    isbn: str
    list_price: float

    def price(self, coupon):
        """Price after taking off a coupon."""
        return self.list_price - coupon

    def describe(self):
        """Short label for the book."""
        return f"ISBN: {self.isbn}"


@dataclass
class DiscountedBook(Book):
    """A book sold at a fraction of its list price."""

    discount: float

    def price(self, coupon):
        """Discounted price after taking off a coupon."""
        return self.list_price * self.discount - coupon