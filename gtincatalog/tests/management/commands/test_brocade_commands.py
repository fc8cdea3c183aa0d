"""Tests for the fetch_brocade_product and list_brocade_products commands."""

import io
from unittest.mock import patch

import pytest
from django.core.management import CommandError, call_command

from gtincatalog.services.brocade_impl import BrocadeError, Product
from gtincatalog.services.gtin_impl import GTIN
from gtincatalog.tests.factories import ProductFactory


class TestFetchBrocadeProductCommand:
    @patch("gtincatalog.management.commands.fetch_brocade_product.BrocadeClient")
    def test_prints_product(self, mock_client_class):
        mock_client = mock_client_class.return_value
        mock_client.get_product.return_value = Product(
            gtin14="09780262134729",
            brand_name=None,
            name="The Laws Of Simplicity",
        )

        out = io.StringIO()
        call_command("fetch_brocade_product", "09780262134729", stdout=out)

        output = out.getvalue()
        assert "Found product for GTIN 09780262134729" in output
        assert "Brand: -" in output
        assert "Name:  The Laws Of Simplicity" in output
        mock_client.get_product.assert_called_once_with(GTIN.parse("09780262134729"))

    @patch("gtincatalog.management.commands.fetch_brocade_product.BrocadeClient")
    def test_warns_on_invalid_gtin_but_still_fetches(self, mock_client_class):
        mock_client = mock_client_class.return_value
        mock_client.get_product.return_value = Product(gtin14="00074887615305", brand_name="Up & Up", name="Towelettes")

        out = io.StringIO()
        call_command("fetch_brocade_product", "00074887615305", stdout=out)

        output = out.getvalue()
        assert "fails validation" in output
        assert "Brand: Up & Up" in output

    @patch("gtincatalog.management.commands.fetch_brocade_product.BrocadeClient")
    def test_parse_error(self, mock_client_class):
        with pytest.raises(CommandError, match="expected 14 characters"):
            call_command("fetch_brocade_product", "12345", stdout=io.StringIO())
        mock_client_class.assert_not_called()

    @patch("gtincatalog.management.commands.fetch_brocade_product.BrocadeClient")
    def test_transport_error(self, mock_client_class):
        mock_client_class.return_value.get_product.side_effect = BrocadeError("Network Error: refused")

        with pytest.raises(CommandError, match="Could not fetch product 09780262134729"):
            call_command("fetch_brocade_product", "09780262134729", stdout=io.StringIO())


class TestListBrocadeProductsCommand:
    @patch("gtincatalog.management.commands.list_brocade_products.BrocadeClient")
    def test_lists_unfiltered_products_up_to_limit(self, mock_client_class):
        products = ProductFactory.build_batch(5)
        mock_client = mock_client_class.return_value
        mock_client.get_product_list.return_value = products

        out = io.StringIO()
        call_command("list_brocade_products", "--limit", "3", stdout=out)

        output = out.getvalue()
        assert "Received 5 product(s)." in output
        for product in products[:3]:
            assert product.gtin14 in output
        for product in products[3:]:
            assert product.gtin14 not in output
        mock_client.query_products.assert_not_called()

    @patch("gtincatalog.management.commands.list_brocade_products.BrocadeClient")
    def test_query(self, mock_client_class):
        mock_client = mock_client_class.return_value
        mock_client.query_products.return_value = [Product(gtin14="00074887615305", brand_name="Up & Up", name="Towelettes")]

        out = io.StringIO()
        call_command("list_brocade_products", "--query", "cucumber", stdout=out)

        assert "00074887615305  Up & Up  Towelettes" in out.getvalue()
        mock_client.query_products.assert_called_once_with("cucumber")
        mock_client.get_product_list.assert_not_called()

    @patch("gtincatalog.management.commands.list_brocade_products.BrocadeClient")
    def test_no_products(self, mock_client_class):
        mock_client_class.return_value.get_product_list.return_value = []

        out = io.StringIO()
        call_command("list_brocade_products", stdout=out)

        assert "No products found." in out.getvalue()

    @patch("gtincatalog.management.commands.list_brocade_products.BrocadeClient")
    def test_transport_error(self, mock_client_class):
        mock_client_class.return_value.get_product_list.side_effect = BrocadeError("HTTP Error 500", status_code=500)

        with pytest.raises(CommandError, match="Could not list products"):
            call_command("list_brocade_products", stdout=io.StringIO())
