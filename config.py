import os

# Snowflake Configuration - Load from environment variables
SNOWFLAKE_CONFIG = {
    'account': os.getenv('SNOWFLAKE_ACCOUNT', ''),
    'user': os.getenv('SNOWFLAKE_USERNAME', ''),
    'password': os.getenv('SNOWFLAKE_PASSWORD', ''),
    'warehouse': os.getenv('SNOWFLAKE_WAREHOUSE', ''),
    'database': os.getenv('SNOWFLAKE_DATABASE', ''),
    'schema': os.getenv('SNOWFLAKE_SCHEMA', ''),
    'role': os.getenv('SNOWFLAKE_ROLE'),
}

# Marketing Cloud Configuration - Load from environment variables
SFMC_CONFIG = {
    'subdomain': os.getenv('SFMC_SUBDOMAIN', ''),
    'client_id': os.getenv('SFMC_CLIENT_ID', ''),
    'client_secret': os.getenv('SFMC_CLIENT_SECRET', ''),
    'de_external_key': os.getenv('SFMC_DE_EXTERNAL_KEY', ''),
}

# Application Configuration - Load from environment variables
APP_CONFIG = {
    'port': int(os.getenv('PORT', '3000')),
    'log_level': os.getenv('APP_LOG_LEVEL', 'INFO'),
    'log_file': os.getenv('APP_LOG_FILE', ''),
}
