# snowflake_sfmc_sync/sync.py

import logging
from errors import QueryError, AuthError, UploadError
from utils import Utils

logger = logging.getLogger('snowflake_sfmc_sync')

QUERY_FAILED = "Snowflake query failed"
SFMC_FAILED = "SFMC API error"
METHOD_NOT_ALLOWED = "Only GET allowed"


def to_upload_records(rows):
    """Reshape subscriber rows into data extension rowset entries, one per row."""
    return [
        {
            'keys': {'SubscriberKey': Utils.to_json_value(row.get('SUBSCRIBERKEY'))},
            'values': {
                'Email': Utils.to_json_value(row.get('EMAIL')),
                'FirstName': Utils.to_json_value(row.get('FIRSTNAME')),
                'LastName': Utils.to_json_value(row.get('LASTNAME')),
            },
        }
        for row in rows
    ]


class SubscriberSync:
    """Reads subscribers from Snowflake and writes them to an SFMC data extension.

    Transport neutral: the Flask route and the serverless adapter both call
    handle_request() and turn the (status, body) pair into a response.
    """

    def __init__(self, snowflake_client, sfmc_client):
        self.snowflake_client = snowflake_client
        self.sfmc_client = sfmc_client

    def run_sync(self):
        self.snowflake_client.ensure_connected()
        rows = self.snowflake_client.fetch_subscribers()
        records = to_upload_records(rows)
        token = self.sfmc_client.fetch_token()
        result = self.sfmc_client.upload(records, token)
        return len(records), result

    def handle_request(self, method):
        if method != 'GET':
            return 405, METHOD_NOT_ALLOWED

        try:
            inserted, result = self.run_sync()
        except QueryError as e:
            logger.error(f"Query error: {e}")
            return 500, QUERY_FAILED
        except (AuthError, UploadError) as e:
            logger.error(f"SFMC error: {e}")
            return 500, SFMC_FAILED

        logger.info(f"Sync completed: {inserted} subscribers sent to SFMC.")
        return 200, {'success': True, 'inserted': inserted, 'result': result}

    def cleanup(self):
        self.snowflake_client.close()
