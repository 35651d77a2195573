from .data import Customer, DataSource, Order, Product, Supplier
from .harness import (
    Sample,
    SampleHarness,
    category,
    description,
    linked_class,
    linked_method,
    title,
)
from .queries import QuerySamples

__all__ = [
    "Customer",
    "DataSource",
    "Order",
    "Product",
    "Supplier",
    "Sample",
    "SampleHarness",
    "QuerySamples",
    "category",
    "description",
    "linked_class",
    "linked_method",
    "title",
]
