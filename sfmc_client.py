# snowflake_sfmc_sync/sfmc_client.py

import logging
import requests
from errors import AuthError, UploadError

logger = logging.getLogger('snowflake_sfmc_sync')

AUTH_URL = "https://{subdomain}.auth.marketingcloudapis.com/v2/token"
ROWSET_URL = "https://{subdomain}.rest.marketingcloudapis.com/hub/v1/dataevents/key:{external_key}/rowset"


class SFMCClient:
    def __init__(self, config):
        self.config = config

    @property
    def auth_url(self):
        return AUTH_URL.format(subdomain=self.config['subdomain'])

    @property
    def rowset_url(self):
        return ROWSET_URL.format(
            subdomain=self.config['subdomain'],
            external_key=self.config['de_external_key'],
        )

    def fetch_token(self):
        """Exchange the tenant's client credentials for a bearer token.

        Every call is a fresh round trip; tokens are never cached.
        """
        payload = {
            'grant_type': 'client_credentials',
            'client_id': self.config['client_id'],
            'client_secret': self.config['client_secret'],
        }
        try:
            response = requests.post(self.auth_url, json=payload)
            response.raise_for_status()
            data = response.json()
            token = data.get('access_token') if isinstance(data, dict) else None
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"SFMC auth error: {e}")
            raise AuthError(str(e)) from e

        if not token:
            logger.error("SFMC auth error: response did not contain an access_token")
            raise AuthError("access_token missing from token response")
        return token

    def upload(self, records, token):
        headers = {
            'Authorization': f"Bearer {token}",
            'Content-Type': 'application/json',
        }
        try:
            response = requests.post(self.rowset_url, json=records, headers=headers)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"SFMC upload error: {e}")
            raise UploadError(str(e)) from e

        logger.info(f"Uploaded {len(records)} rows to data extension {self.config['de_external_key']}.")
        try:
            return response.json()
        except ValueError:
            return response.text
