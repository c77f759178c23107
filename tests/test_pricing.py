import pytest

from practica.pricing import Book, DiscountedBook


def test_book_price_subtracts_coupon():
    book = Book("1111-abcd", 200.0)
    assert book.price(0.0) == 200.0
    assert book.price(25.0) + 25.0 == pytest.approx(book.price(0.0))


def test_describe_shows_isbn():
    assert Book("1111-abcd", 200.0).describe() == "ISBN: 1111-abcd"
    assert DiscountedBook("2222-disc", 400.0, 0.87).describe() == "ISBN: 2222-disc"


def test_discounted_price():
    book = DiscountedBook("2222-disc", 400.0, 0.87)
    assert book.price(25.0) == pytest.approx(323.0)


def test_full_discount_matches_plain_book():
    plain = Book("x", 120.0)
    discounted = DiscountedBook("x", 120.0, 1.0)
    assert discounted.price(10.0) == pytest.approx(plain.price(10.0))


def test_price_dispatches_through_base():
    books = [Book("a", 100.0), DiscountedBook("b", 100.0, 0.5)]
    prices = [book.price(0.0) for book in books]
    assert prices[1] < prices[0]