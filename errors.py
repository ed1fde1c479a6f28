# snowflake_sfmc_sync/errors.py


class SyncError(Exception):
    """Base class for failures that end a sync request."""


class QueryError(SyncError):
    """The Snowflake read failed or no usable connection exists."""


class AuthError(SyncError):
    """The SFMC client-credentials token exchange failed."""


class UploadError(SyncError):
    """The SFMC data extension rowset write failed."""
