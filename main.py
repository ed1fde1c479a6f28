# snowflake_sfmc_sync/main.py

from config import APP_CONFIG
from logger import configure_logger
from app import build_sync, create_app

logger = configure_logger()


def main():
    subscriber_sync = None
    try:
        logger.info("Starting Snowflake-SFMC subscriber sync server...")
        subscriber_sync = build_sync(connect_on_init=True)
        app = create_app(subscriber_sync)
        app.run(host="0.0.0.0", port=APP_CONFIG['port'])
    except Exception as e:
        logger.critical(f"Critical error in main(): {e}")
        return 1
    finally:
        if subscriber_sync is not None:
            subscriber_sync.cleanup()
    return 0


if __name__ == "__main__":
    exit_code = main()
    exit(exit_code)
