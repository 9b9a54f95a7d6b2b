import logging

import pytest


@pytest.fixture
def mixed_corpus():
    return [{"a": 1}, {"a": "x"}, {"a": None}, {}]


@pytest.fixture
def orders_corpus():
    return [
        {
            "_id": "o1",
            "customer": {"name": "Ada", "email": "ada@example.com"},
            "items": [{"sku": "A1", "qty": 2}, {"sku": "B7", "qty": 1, "gift": True}],
            "total": 31.5,
        },
        {
            "_id": "o2",
            "customer": {"name": "Linus", "email": None},
            "items": [],
            "total": "12.00",
        },
        {
            "_id": "o3",
            "customer": "anonymous",
            "items": [{"sku": "C3", "qty": 4}, "legacy-item"],
            "coupon": None,
        },
    ]


@pytest.fixture(autouse=True)
def reset_docshape_logger():
    """The CLI installs its own handler, keep tests independent of it."""
    yield
    log = logging.getLogger("docshape")
    log.handlers.clear()
    log.propagate = True
    log.setLevel(logging.NOTSET)
