"""
Blacklist store configuration settings for the product selector.
"""
import os
from typing import Dict, Any, Optional
from product_selector.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

SNOWFLAKE_KEYS = (
    "account",
    "user",
    "password",
    "authenticator",
    "role",
    "warehouse",
    "database",
    "schema",
)

REQUIRED_KEYS = ("account", "user")


def get_snowflake_config() -> Dict[str, Any]:
    """
    Get Snowflake configuration from environment variables.

    Only keys that are set are returned, so the connector can tell an
    unconfigured store apart from a configured one.

    Returns:
        Dict[str, Any]: Snowflake configuration dictionary
    """
    config = {}
    for key in SNOWFLAKE_KEYS:
        value = os.environ.get(f"SNOWFLAKE_{key.upper()}")
        if value:
            config[key] = value

    logger.debug(f"Using Snowflake config with account: {config.get('account')}, user: {config.get('user')}")

    return config


def is_store_configured(config: Optional[Dict[str, Any]]) -> bool:
    """
    Check whether a store configuration has the keys needed to connect.

    Args:
        config (Optional[Dict[str, Any]]): Snowflake configuration

    Returns:
        bool: True if account and user are present
    """
    if not config:
        return False
    return all(config.get(key) for key in REQUIRED_KEYS)


# Snowflake connection parameters
SNOWFLAKE_CONFIG: Dict[str, Any] = get_snowflake_config()

BLACKLIST_TABLE = os.environ.get("PRODUCT_SELECTOR_BLACKLIST_TABLE", "CATEGORY_BLACKLIST")

# Query templates with placeholders
CREATE_TABLE_TEMPLATE = f"""
CREATE TABLE IF NOT EXISTS {BLACKLIST_TABLE} (
    CATEGORY_ID STRING NOT NULL PRIMARY KEY,
    IS_EXCLUDE BOOLEAN NOT NULL DEFAULT FALSE
)
"""

GET_STATUS_TEMPLATE = f"""
SELECT
    CATEGORY_ID,
    IS_EXCLUDE
FROM
    {BLACKLIST_TABLE}
WHERE
    CATEGORY_ID = :category_id
"""

UPSERT_STATUS_TEMPLATE = f"""
MERGE INTO {BLACKLIST_TABLE} t
USING (SELECT :category_id AS CATEGORY_ID, :is_exclude AS IS_EXCLUDE) s
ON t.CATEGORY_ID = s.CATEGORY_ID
WHEN MATCHED THEN
    UPDATE SET t.IS_EXCLUDE = s.IS_EXCLUDE
WHEN NOT MATCHED THEN
    INSERT (CATEGORY_ID, IS_EXCLUDE) VALUES (s.CATEGORY_ID, s.IS_EXCLUDE)
"""

LIST_BLACKLISTED_TEMPLATE = f"""
SELECT
    CATEGORY_ID
FROM
    {BLACKLIST_TABLE}
WHERE
    IS_EXCLUDE = TRUE
"""

LIST_ALL_TEMPLATE = f"""
SELECT
    CATEGORY_ID,
    IS_EXCLUDE
FROM
    {BLACKLIST_TABLE}
"""

# Probe key used by the connection test; absence is fine, only the round trip matters
CONNECTION_PROBE_KEY = "test"
