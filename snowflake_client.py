# snowflake_sfmc_sync/snowflake_client.py

import logging
import threading
import snowflake.connector
from errors import QueryError

logger = logging.getLogger('snowflake_sfmc_sync')

SUBSCRIBERS_QUERY = (
    "SELECT SubscriberKey, Email, FirstName, LastName "
    "FROM {database}.{schema}.SUBSCRIBERS LIMIT 5"
)


class SnowflakeClient:
    def __init__(self, config, connect_on_init=False):
        self.config = config
        self.conn = None
        self.connect_attempted = False
        self._connect_lock = threading.Lock()
        if connect_on_init:
            self.ensure_connected()

    def connect(self):
        logger.info("Connecting to Snowflake...")
        params = {
            'account': self.config['account'],
            'user': self.config['user'],
            'password': self.config['password'],
            'warehouse': self.config['warehouse'],
            'database': self.config['database'],
            'schema': self.config['schema'],
        }
        if self.config.get('role'):
            params['role'] = self.config['role']
        self.conn = snowflake.connector.connect(**params)
        logger.info("Connected to Snowflake.")

    def ensure_connected(self):
        """Open the shared connection once per client.

        A failed first attempt is logged and not repeated; queries made
        afterwards raise QueryError.
        """
        if self.connect_attempted:
            return
        with self._connect_lock:
            if self.connect_attempted:
                return
            try:
                self.connect()
            except snowflake.connector.errors.Error as e:
                self.conn = None
                logger.error(f"Snowflake connection failed: {e}")
            finally:
                self.connect_attempted = True

    def subscribers_query(self):
        return SUBSCRIBERS_QUERY.format(
            database=self.config['database'],
            schema=self.config['schema'],
        )

    def query(self, sql):
        if self.conn is None:
            raise QueryError("No usable Snowflake connection")

        cursor = None
        try:
            cursor = self.conn.cursor()
            cursor.execute(sql)
            rows = cursor.fetchall()
            cols = [c[0] for c in cursor.description]
        except snowflake.connector.errors.Error as e:
            raise QueryError(str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

        return [dict(zip(cols, r)) for r in rows]

    def fetch_subscribers(self):
        rows = self.query(self.subscribers_query())
        logger.info(f"{len(rows)} subscribers loaded from Snowflake.")
        return rows

    def close(self):
        if self.conn:
            self.conn.close()
            self.conn = None
            logger.info("Snowflake connection closed.")
