"""
Pydantic response schemas for the API (camelCase on the wire).
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionOut(_CamelModel):
    id: str = Field(alias="_id")
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    date_of_sale: Optional[dt.datetime] = None
    category: Optional[str] = None
    sold: Optional[bool] = None
    image: Optional[str] = None


class TransactionPage(_CamelModel):
    transactions: list[TransactionOut]
    total: int
    current_page: int
    total_pages: int


class StatisticsResponse(_CamelModel):
    total_sales: float
    total_items_sold: int
    total_items_not_sold: int


class PriceRangeCount(BaseModel):
    range: str
    count: int


class CategoryCount(BaseModel):
    category: Optional[str] = None
    count: int


class CombinedResponse(_CamelModel):
    statistics: StatisticsResponse
    bar_chart: list[PriceRangeCount]
    pie_chart: list[CategoryCount]


class InitializeResponse(BaseModel):
    message: str
    count: int


class HealthResponse(BaseModel):
    status: str
    transactions: int
