"""Unit tests for middleware components"""
import pytest
from unittest.mock import Mock, patch

from app.middleware.correlation_id import (
    CorrelationIdMiddleware,
    get_correlation_id,
    new_correlation_id,
)


class MockRequest:
    def __init__(self, headers):
        self.headers = headers
        self.state = Mock()


class TestCorrelationIdMiddleware:
    """Test CorrelationIdMiddleware functionality"""

    @pytest.mark.asyncio
    @patch('app.middleware.correlation_id.config')
    async def test_correlation_id_from_header(self, mock_config):
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        captured_id = None

        async def call_next(req):
            nonlocal captured_id
            captured_id = get_correlation_id()
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(MockRequest({"X-Correlation-ID": "test-correlation-123"}), call_next)

        assert captured_id == "test-correlation-123"
        assert response.headers["X-Correlation-ID"] == "test-correlation-123"

    @pytest.mark.asyncio
    @patch('app.middleware.correlation_id.config')
    async def test_correlation_id_generated(self, mock_config):
        mock_config.correlation_id_header = "X-Correlation-ID"
        middleware = CorrelationIdMiddleware(Mock())
        request = MockRequest({})

        async def call_next(req):
            response = Mock()
            response.headers = {}
            return response

        response = await middleware.dispatch(request, call_next)

        generated = response.headers["X-Correlation-ID"]
        assert len(generated) == 36
        assert request.state.correlation_id == generated


def test_new_correlation_id_sets_context():
    correlation_id = new_correlation_id()
    assert get_correlation_id() == correlation_id
