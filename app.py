# snowflake_sfmc_sync/app.py

import atexit
from flask import Flask, Response, jsonify, request
from config import SNOWFLAKE_CONFIG, SFMC_CONFIG
from snowflake_client import SnowflakeClient
from sfmc_client import SFMCClient
from sync import METHOD_NOT_ALLOWED, SubscriberSync

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def build_sync(connect_on_init=False):
    snowflake_client = SnowflakeClient(SNOWFLAKE_CONFIG, connect_on_init=connect_on_init)
    sfmc_client = SFMCClient(SFMC_CONFIG)
    return SubscriberSync(snowflake_client, sfmc_client)


def create_app(subscriber_sync=None):
    """Flask app exposing the sync endpoint.

    When no SubscriberSync is given one is built from the environment, with a
    lazily opened Snowflake connection that is closed at interpreter exit.
    """
    if subscriber_sync is None:
        subscriber_sync = build_sync()
        atexit.register(subscriber_sync.cleanup)

    app = Flask(__name__)
    app.config['SUBSCRIBER_SYNC'] = subscriber_sync

    # Every method is routed here so non-GET gets the plaintext 405, not Flask's HTML page
    @app.route("/sync", methods=ALL_METHODS, provide_automatic_options=False)
    @app.route("/api/sync", methods=ALL_METHODS, provide_automatic_options=False)
    def sync_subscribers():
        status, body = subscriber_sync.handle_request(request.method)
        if isinstance(body, dict):
            return jsonify(body), status
        return Response(body, status=status, mimetype="text/plain")

    # Methods Flask rejects before routing (TRACE, CONNECT) get the same plaintext body
    @app.errorhandler(405)
    def method_not_allowed(error):
        return Response(METHOD_NOT_ALLOWED, status=405, mimetype="text/plain")

    return app
