import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pydantic
import requests
from django.conf import settings
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from gtincatalog.services.brocade_impl.exceptions import BrocadeError
from gtincatalog.services.brocade_impl.schemas import Product, ProductList
from gtincatalog.services.gtin_impl import GTIN

logger = logging.getLogger(__name__)

BASE_URL = "https://www.brocade.io/products"


@dataclass
class BrocadeConfig:
    """Configuration for the Brocade catalog client."""

    base_url: str = BASE_URL
    timeout: int = 30
    max_retries: int = 0
    backoff_factor: float = 0.0


class BrocadeClient:
    """
    Thin client for the Brocade product catalog.

    Every call is a single GET. Failures of any kind surface as BrocadeError.
    """

    def __init__(self, config: Optional[BrocadeConfig] = None):
        self.config = config or BrocadeConfig(
            base_url=getattr(settings, "BROCADE_BASE_URL", BASE_URL),
            timeout=getattr(settings, "BROCADE_TIMEOUT", 30),
            max_retries=getattr(settings, "BROCADE_MAX_RETRIES", 0),
            backoff_factor=getattr(settings, "BROCADE_BACKOFF_FACTOR", 0.0),
        )
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Configures a session that asks for JSON, retrying 5xx only when retries are enabled."""
        session = requests.Session()
        if self.config.max_retries > 0:
            retry_strategy = Retry(
                total=self.config.max_retries,
                backoff_factor=self.config.backoff_factor,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
        session.headers.update({"accept": "application/json"})
        return session

    def _get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        """Sends a GET request and decodes the JSON body."""
        logger.debug(f"Brocade GET {url} params={params}")
        try:
            response = self._session.get(url, params=params, timeout=self.config.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            error_body = e.response.text if e.response is not None else None
            logger.error(f"Brocade HTTP Error: {status_code} - {error_body}")
            raise BrocadeError(f"HTTP Error {status_code}", status_code=status_code, response_body=error_body) from e
        except ValueError as e:
            logger.error(f"Failed to parse Brocade JSON response from {url}: {e}")
            raise BrocadeError(f"Invalid JSON response: {e}") from e
        except requests.RequestException as e:
            logger.error(f"Brocade Network Error: {e}")
            raise BrocadeError(f"Network Error: {e}") from e

    def _to_product(self, data: Any) -> Product:
        try:
            return Product.model_validate(data)
        except pydantic.ValidationError as e:
            logger.error(f"Unexpected Brocade product payload: {e}")
            raise BrocadeError(f"Invalid product record: {e}") from e

    def _to_product_list(self, data: Any) -> ProductList:
        if not isinstance(data, list):
            logger.error(f"Expected a JSON array from Brocade, got {type(data).__name__}")
            raise BrocadeError("Invalid product list: expected a JSON array")
        return [self._to_product(item) for item in data]

    def get_product(self, gtin: GTIN) -> Product:
        """Fetches a single product record by its GTIN."""
        return self._to_product(self._get_json(f"{self.config.base_url}/{gtin}"))

    def get_product_list(self) -> ProductList:
        """Fetches the unfiltered product list."""
        return self._to_product_list(self._get_json(self.config.base_url))

    def query_products(self, query: str) -> ProductList:
        """Fetches the products matching a free-text query."""
        return self._to_product_list(self._get_json(self.config.base_url, params={"query": query}))
