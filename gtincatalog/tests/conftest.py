from unittest.mock import MagicMock

import pytest
import requests

from gtincatalog.services.brocade_impl import BrocadeClient, BrocadeConfig


@pytest.fixture
def brocade_config():
    return BrocadeConfig(base_url="https://test.brocade.io/products", timeout=5)


@pytest.fixture
def mock_session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def brocade_client(brocade_config, mock_session):
    client = BrocadeClient(config=brocade_config)
    client._session = mock_session
    return client


@pytest.fixture
def make_response():
    """Builds requests.Response doubles returning `json_body` from .json()."""

    def _make(json_body=None, status_code=200, text=""):
        response = MagicMock(spec=requests.Response)
        response.status_code = status_code
        response.text = text
        response.json.return_value = json_body
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(response=response)
        return response

    return _make
