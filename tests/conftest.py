"""Shared test fixtures for the subscriber sync test suite."""

from unittest.mock import MagicMock, patch

import pytest


SNOWFLAKE_TEST_CONFIG = {
    "account": "test-account",
    "user": "tester",
    "password": "secret",
    "warehouse": "TEST_WH",
    "database": "MARKETING",
    "schema": "PUBLIC",
    "role": None,
}

SFMC_TEST_CONFIG = {
    "subdomain": "mc123",
    "client_id": "client-id",
    "client_secret": "client-secret",
    "de_external_key": "DE-KEY",
}

SUBSCRIBER_COLUMNS = ("SUBSCRIBERKEY", "EMAIL", "FIRSTNAME", "LASTNAME")


def make_subscriber_row(**overrides):
    """Build a subscriber row as SnowflakeClient.query() returns it."""
    row = {
        "SUBSCRIBERKEY": "A1",
        "EMAIL": "a@x.com",
        "FIRSTNAME": "A",
        "LASTNAME": "One",
    }
    row.update(overrides)
    return row


def make_response(status_code=200, json_data=None, text=""):
    """Mock requests.Response with raise_for_status behaving like the real one."""
    import requests

    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


# ---------------------------------------------------------------------------
# Snowflake fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def snowflake_config():
    return dict(SNOWFLAKE_TEST_CONFIG)


@pytest.fixture
def sfmc_config():
    return dict(SFMC_TEST_CONFIG)


@pytest.fixture
def mock_cursor():
    """Mock Snowflake cursor returning no rows by default."""
    cursor = MagicMock()
    cursor.fetchall.return_value = []
    cursor.description = [(name,) for name in SUBSCRIBER_COLUMNS]
    return cursor


@pytest.fixture
def mock_connect(mock_cursor):
    """Patch snowflake.connector.connect to hand out a mock connection."""
    with patch("snowflake_client.snowflake.connector.connect") as connect:
        connection = MagicMock()
        connection.cursor.return_value = mock_cursor
        connect.return_value = connection
        yield connect


# ---------------------------------------------------------------------------
# SFMC fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_post():
    """Patch requests.post as used by sfmc_client."""
    with patch("sfmc_client.requests.post") as post:
        yield post
