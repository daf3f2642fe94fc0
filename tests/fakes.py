"""Deterministic seed items and HTTP fakes shared by the test modules."""

from __future__ import annotations

import requests


SAMPLE_ITEMS = [
    {
        "id": 1,
        "title": "Mens Cotton Jacket",
        "description": "great outerwear jacket for Spring/Autumn/Winter",
        "price": 55.99,
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-03-05T10:00:00Z",
    },
    {
        "id": 2,
        "title": "Solid Gold Petite Micropave",
        "description": "Satisfaction Guaranteed. Return or exchange any order within 30 days.",
        "price": 168,
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/61sbMiUnoGL._AC_UL640_QL65_ML3_.jpg",
        "sold": False,
        "dateOfSale": "2022-03-10T10:00:00Z",
    },
    {
        "id": 3,
        "title": "WD 2TB Elements Portable External Hard Drive",
        "description": "USB 3.0 and USB 2.0 compatibility",
        "price": 64,
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
        "sold": True,
        "dateOfSale": "2021-03-20T10:00:00Z",
    },
    {
        "id": 4,
        "title": "Samsung 49-Inch CHG90 Curved Gaming Monitor",
        "description": "49 inch super ultrawide 32:9 curved gaming monitor",
        "price": 999.99,
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/81Zt42ioCgL._AC_SX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-03-27T10:00:00Z",
    },
    {
        "id": 5,
        "title": "Rain Jacket Women Windbreaker",
        "description": "Lightweight perfect for trip or casual wear",
        "price": 39.99,
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/71HblAHs5xL._AC_UY879_-2.jpg",
        "sold": False,
        "dateOfSale": "2022-03-15T10:00:00Z",
    },
    {
        "id": 6,
        "title": "Opna Women's Short Sleeve Moisture",
        "description": "100% Polyester, Machine wash",
        "price": 7.95,
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/51eg55uWmdL._AC_UX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-04-02T10:00:00Z",
    },
    {
        "id": 7,
        "title": "DANVOUY Womens T Shirt Casual Cotton Short",
        "description": "95%Cotton,5%Spandex",
        "price": 12.99,
        "category": "women's clothing",
        "image": "https://fakestoreapi.com/img/61pHAEJ4NML._AC_UX679_.jpg",
        "sold": False,
        "dateOfSale": "2021-11-27T20:29:54+05:30",
    },
    {
        "id": 8,
        "title": "Acer SB220Q bi 21.5 inches Full HD Monitor",
        "description": "21. 5 inches Full HD widescreen IPS display",
        "price": 599,
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/81QpkIctqPL._AC_SX679_.jpg",
        "sold": True,
        "dateOfSale": "2022-08-27T10:00:00Z",
    },
]

# Derived expectations for March in SAMPLE_ITEMS (ids 1-5)
MARCH_TOTAL = 5
MARCH_SALES = 55.99 + 168 + 64 + 999.99 + 39.99
MARCH_SOLD = 3
MARCH_NOT_SOLD = 2


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload=None, status_code: int = 200, json_error: bool = False) -> None:
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload
