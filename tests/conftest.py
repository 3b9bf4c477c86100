import logging

import numpy as np
import pytest

from mipmap_1d.logger import attach_handler, set_level


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def example_data():
    return [2, 4, 6, 8, 9]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def package_log_records():
    """Collect records emitted on the ``mipmap_1d`` logger at DEBUG level."""
    handler = _ListHandler()
    attach_handler(handler)
    set_level(logging.DEBUG)
    yield handler.records
    set_level(logging.INFO)
    logging.getLogger("mipmap_1d").removeHandler(handler)
