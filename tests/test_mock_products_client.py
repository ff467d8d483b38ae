import pytest

from dummyjson.integrations.clients.mocks.products import MockProductsClient
from dummyjson.integrations.contracts.interfaces import Product, ProductsClient
from dummyjson.integrations.errors import RemoteRejectionError


def test_add_product_success():
    mock = MockProductsClient(lambda p: Product(**dict(p.to_dict(), title="Mocked Product")))

    output = mock.add_product(
        Product(title="Test", description="Desc", price=10, brand="Brand", category="Category")
    )

    assert output.title == "Mocked Product"
    assert output.price == 10


def test_add_product_failure():
    def fail(product):
        raise RemoteRejectionError(500)

    mock = MockProductsClient(fail)

    with pytest.raises(RemoteRejectionError, match="500"):
        mock.add_product(Product())


def test_default_mock_echoes_and_records_submissions(sample_product):
    mock = MockProductsClient()

    assert isinstance(mock, ProductsClient)
    assert mock.add_product(sample_product) == sample_product
    assert mock.submitted == [sample_product]
