import pytest

from stubs.stub_data import get_cart_product_data_stub


@pytest.fixture
def sample_cart_products():
    return [
        get_cart_product_data_stub(),
        get_cart_product_data_stub(7),
    ]


@pytest.fixture
def seeds():
    return [-5, 0, 1, 2, 42, 1234, 99999]
