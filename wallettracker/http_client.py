"""
HTTP Client for the wallet tracker API
Talks to a running `wallettracker.api.app` server
"""

import requests
from typing import Dict, Any, List, Optional

from wallettracker.config import load_settings


class WalletClient:
    """
    HTTP client for a wallet tracker API server.

    Rejected movements are not HTTP errors: deposit() and withdraw() return
    the response body with `success` False and an `error_code`.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API. Defaults to WALLET_API_URL.
            timeout: Request timeout in seconds. Defaults to WALLET_HTTP_TIMEOUT.
        """
        if base_url is None or timeout is None:
            settings = load_settings()
            base_url = base_url or settings.api_url
            timeout = timeout or settings.http_timeout

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

        self.session.headers.update({
            'Content-Type': 'application/json',
            'User-Agent': 'WalletTracker-Client/1.0'
        })

    def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint path (e.g., '/v1/balance')
            data: Request body data (for POST)

        Returns:
            Response data as dictionary

        Raises:
            requests.HTTPError: If the server answers with an error status
            TimeoutError: If the request times out
            ConnectionError: If the server can't be reached
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=data,
                timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.HTTPError as e:
            # Surface FastAPI's `detail` when there is one
            try:
                detail = e.response.json().get('detail')
            except (ValueError, AttributeError):
                raise e
            if not detail:
                raise e
            raise requests.HTTPError(f"{e}: {detail}", response=e.response) from e

        except requests.exceptions.Timeout:
            raise TimeoutError(f"Request to {url} timed out")

        except requests.exceptions.ConnectionError:
            raise ConnectionError(f"Failed to connect to {url}. Is the server running?")

    def health(self) -> Dict[str, Any]:
        """Check that the server is up."""
        return self._make_request('GET', '/health')

    def get_balance(self) -> int:
        """Current balance of the server's wallet."""
        return self._make_request('GET', '/v1/balance')['balance']

    def deposit(self, address: str, amount: int) -> Dict[str, Any]:
        """Submit a deposit. Returns the movement result body."""
        return self._make_request('POST', '/v1/deposits', data={'address': address, 'amount': amount})

    def withdraw(self, address: str, amount: int) -> Dict[str, Any]:
        """Submit a withdrawal. Returns the movement result body."""
        return self._make_request('POST', '/v1/withdrawals', data={'address': address, 'amount': amount})

    def get_history(self) -> List[str]:
        """Formatted history lines, oldest first."""
        return self._make_request('GET', '/v1/history')['lines']

    def close(self) -> None:
        self.session.close()
