"""Tests for the command line entry points"""
import pytest
from unittest.mock import AsyncMock, patch

from pydantic import ValidationError

from app import cli
from app.core.errors import ErrorResponse
from app.models.product import Product


class TestCli:

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 2
        assert "process-order" in capsys.readouterr().out

    @patch("app.cli.close_mongo_connection", new_callable=AsyncMock)
    @patch("app.cli.get_order_service", new_callable=AsyncMock)
    def test_process_order(self, mock_get_service, mock_close, capsys):
        service = AsyncMock()
        service.process_order.return_value = 12
        mock_get_service.return_value = service

        assert cli.main(["process-order", "12"]) == 0

        service.process_order.assert_awaited_once_with(12)
        mock_close.assert_awaited_once()
        assert "Processed order 12" in capsys.readouterr().out

    @patch("app.cli.close_mongo_connection", new_callable=AsyncMock)
    @patch("app.cli.get_order_service", new_callable=AsyncMock)
    def test_process_missing_order(self, mock_get_service, mock_close):
        service = AsyncMock()
        service.process_order.side_effect = ErrorResponse("Order not found", status_code=404)
        mock_get_service.return_value = service

        assert cli.main(["process-order", "99"]) == 1
        mock_close.assert_awaited_once()

    @patch("app.cli.close_mongo_connection", new_callable=AsyncMock)
    @patch("app.cli.get_order_service", new_callable=AsyncMock)
    def test_process_order_with_invalid_product_record(self, mock_get_service, mock_close):
        with pytest.raises(ValidationError) as exc_info:
            Product(id=1, name="USB Cable", available=-1)
        service = AsyncMock()
        service.process_order.side_effect = exc_info.value
        mock_get_service.return_value = service

        assert cli.main(["process-order", "5"]) == 1
        mock_close.assert_awaited_once()
