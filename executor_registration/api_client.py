"""
Client for the automation registration API.

All HTTP goes through an HttpClient so tests can swap in a stub transport.
Requests are never retried.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from eth_utils import to_checksum_address

from .config import ConfigError
from .eip712_config import EXECUTOR_BY_ADDRESS_ROUTE, REGISTER_EXECUTOR_ROUTE


class HttpClient:
    def post(self, url: str, json: Dict[str, Any]):
        raise NotImplementedError

    def get(self, url: str):
        raise NotImplementedError


class RequestsClient(HttpClient):
    """
    HttpClient backed by requests, no timeout beyond the library default.

    A session passed in is reused and left open for its owner. Otherwise each
    request runs in its own session, closed once the response is read.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session

    def request(self, method, url, **kwargs):
        if self.session is not None:
            return self.session.request(method, url, **kwargs)
        with requests.Session() as session:
            return session.request(method, url, **kwargs)

    def post(self, url, json):
        return self.request("POST", url, json=json)

    def get(self, url):
        return self.request("GET", url)


@dataclass
class SubmitResult:
    ok: bool
    detail: Any
    status_code: Optional[int] = None


def response_body(response) -> Any:
    """Parsed JSON body, raw text when the body is not JSON, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class RegistrationClient:
    def __init__(self, base_url: Optional[str], http: Optional[HttpClient] = None):
        if not base_url:
            raise ConfigError("API_BASE_URL is not set in the environment variables")
        self.base_url = base_url.rstrip("/")
        self.http = http or RequestsClient()

    def url(self, route: str) -> str:
        return f"{self.base_url}{route}"

    def register_executor(self, payload: Dict[str, Any]) -> SubmitResult:
        """POST the signed payload. Errors are reported in the result, not raised."""
        try:
            response = self.http.post(self.url(REGISTER_EXECUTOR_ROUTE), json=payload)
            response.raise_for_status()
        except requests.HTTPError as e:
            body = response_body(e.response) if e.response is not None else None
            return SubmitResult(
                ok=False,
                detail=body if body is not None else str(e),
                status_code=e.response.status_code if e.response is not None else None,
            )
        except requests.RequestException as e:
            return SubmitResult(ok=False, detail=str(e))

        return SubmitResult(ok=True, detail=response_body(response), status_code=response.status_code)

    def get_executor(self, address: str, chain_id: int) -> SubmitResult:
        """
        Look up a registered executor by address and chain id.

        The address is sent checksummed; a malformed address raises ValueError.
        """
        address = to_checksum_address(address)
        route = EXECUTOR_BY_ADDRESS_ROUTE.format(address=address, chain_id=chain_id)
        try:
            response = self.http.get(self.url(route))
        except requests.RequestException as e:
            return SubmitResult(ok=False, detail=f"failed to fetch executor by address: {e}")

        if response.status_code == 404:
            return SubmitResult(ok=False, detail=f"executor not found: {address}", status_code=404)
        if response.status_code != 200:
            return SubmitResult(
                ok=False,
                detail=f"failed to fetch executor: {response.status_code}",
                status_code=response.status_code,
            )

        body = response_body(response)
        if isinstance(body, dict) and "data" in body:
            body = body["data"]
        return SubmitResult(ok=True, detail=body, status_code=response.status_code)
