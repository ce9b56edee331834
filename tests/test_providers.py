# tests/test_providers.py
"""
Provider Tests - Unit Tests for the Live Exchange API Client

This module contains unit tests for CurrencyLayerProvider, covering request
construction, response parsing and the mapping of transport errors.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- devises.adapters.providers.currencylayer (CurrencyLayerProvider, ExchangeResponse)
- unittest.mock (Mock for API mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking responses)

from devises.adapters.providers.currencylayer import CurrencyLayerProvider, ExchangeResponse
from devises.domain.errors import ProviderUnavailableError

ACCESS_KEY = "0123456789abcdef"


def _response(payload):
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None
    return mock_response


class TestCurrencyLayerProviderInit:
    def test_init_with_defaults(self):
        provider = CurrencyLayerProvider(access_key=ACCESS_KEY)
        assert provider.url == "http://apilayer.net/api/live"
        assert provider.timeout == 10

    def test_init_with_custom_params(self):
        provider = CurrencyLayerProvider(access_key=ACCESS_KEY, base_url="http://test.com/live", timeout=5)
        assert provider.url == "http://test.com/live"
        assert provider.timeout == 5

    def test_init_without_access_key(self):
        with patch("devises.adapters.providers.currencylayer.settings") as mock_settings:
            mock_settings.exchange_api_key = ""
            with pytest.raises(ValueError, match="access key not configured"):
                CurrencyLayerProvider()


class TestRequestExchange:
    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_success(self, mock_get):
        mock_get.return_value = _response({
            "success": True,
            "timestamp": 1430401802,
            "source": "USD",
            "quotes": {"USDEUR": 0.9, "USDGBP": 0.65},
        })

        provider = CurrencyLayerProvider(access_key=ACCESS_KEY)
        result = provider.request_exchange("EUR,GBP")

        assert result.success is True
        assert result.rates == {"USDEUR": 0.9, "USDGBP": 0.65}
        assert result.source == "USD"
        mock_get.assert_called_once_with(
            "http://apilayer.net/api/live",
            params={"access_key": ACCESS_KEY, "currencies": "EUR,GBP", "format": 1},
            timeout=10,
        )

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_codes_are_normalized(self, mock_get):
        mock_get.return_value = _response({"success": True, "quotes": {}})

        CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange(" usd, eur ")

        assert mock_get.call_args.kwargs["params"]["currencies"] == "USD,EUR"

    @pytest.mark.parametrize("codes", ["", " ", "USD,,EUR", "US", "USD;EUR"])
    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_invalid_codes_are_rejected(self, mock_get, codes):
        provider = CurrencyLayerProvider(access_key=ACCESS_KEY)
        with pytest.raises(ValueError, match="Invalid currency code list"):
            provider.request_exchange(codes)
        mock_get.assert_not_called()

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_unsuccessful_body_is_returned(self, mock_get):
        mock_get.return_value = _response({
            "success": False,
            "error": {"code": 101, "type": "missing_access_key", "info": "You have not supplied an API Access Key."},
        })

        result = CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

        assert result.success is False
        assert result.rates == {}
        assert result.error.code == 101
        assert result.error.type == "missing_access_key"

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout("slow")

        with pytest.raises(ProviderUnavailableError, match="timeout"):
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(ProviderUnavailableError, match="request failed"):
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_network_error_hides_access_key(self, mock_get, caplog):
        mock_get.side_effect = requests.exceptions.ConnectionError(
            f"Max retries exceeded with url: /api/live?access_key={ACCESS_KEY}&currencies=EUR"
        )

        with pytest.raises(ProviderUnavailableError) as excinfo:
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

        assert ACCESS_KEY not in str(excinfo.value)
        assert "access_key=***" in str(excinfo.value)
        assert ACCESS_KEY not in caplog.text

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_http_error_log_hides_access_key(self, mock_get, caplog):
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"401 Client Error for url: http://apilayer.net/api/live?access_key={ACCESS_KEY}",
            response=Mock(status_code=401),
        )
        mock_get.return_value = mock_response

        with pytest.raises(ProviderUnavailableError, match="HTTP error 401"):
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

        assert ACCESS_KEY not in caplog.text

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_http_error(self, mock_get):
        error_response = Mock(status_code=503)
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            "503 Server Error", response=error_response
        )
        mock_get.return_value = mock_response

        with pytest.raises(ProviderUnavailableError, match="HTTP error 503"):
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_invalid_json(self, mock_get):
        mock_response = Mock()
        mock_response.raise_for_status.return_value = None
        mock_response.json.side_effect = ValueError("Invalid JSON")
        mock_get.return_value = mock_response

        with pytest.raises(ProviderUnavailableError, match="invalid JSON"):
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_non_dict_response(self, mock_get):
        mock_get.return_value = _response(["not", "a", "dict"])

        with pytest.raises(ProviderUnavailableError, match="non-dict JSON"):
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")

    @patch("devises.adapters.providers.currencylayer.requests.get")
    def test_schema_error(self, mock_get):
        mock_get.return_value = _response({"quotes": {"USDEUR": "not-a-number"}})

        with pytest.raises(ProviderUnavailableError, match="schema error"):
            CurrencyLayerProvider(access_key=ACCESS_KEY).request_exchange("EUR")


class TestExchangeResponse:
    def test_quotes_alias_and_field_name(self):
        by_alias = ExchangeResponse.model_validate({"success": True, "quotes": {"USDEUR": 0.9}})
        by_name = ExchangeResponse(success=True, rates={"USDEUR": 0.9})
        assert by_alias.rates == by_name.rates

    def test_unknown_fields_are_ignored(self):
        response = ExchangeResponse.model_validate(
            {"success": True, "terms": "https://currencylayer.com/terms", "quotes": {}}
        )
        assert response.success is True
