"""
Constants for the bitFlyer client.
"""

# API Configuration
DEFAULT_BASE_URL = "https://api.bitflyer.jp"
DEFAULT_TIMEOUT = 30.0

# Endpoints
BOARD_ENDPOINT = "/v1/getboard"
TICKER_ENDPOINT = "/v1/getticker"
BALANCE_ENDPOINT = "/v1/me/getbalance"
SEND_CHILD_ORDER_ENDPOINT = "/v1/me/sendchildorder"

# Child order defaults
DEFAULT_MINUTE_TO_EXPIRE = 525600  # one year
DEFAULT_TIME_IN_FORCE = "GTC"

# Authentication headers
CONTENT_TYPE_JSON = "application/json"
HEADER_ACCESS_KEY = "ACCESS-KEY"
HEADER_ACCESS_TIMESTAMP = "ACCESS-TIMESTAMP"
HEADER_ACCESS_SIGN = "ACCESS-SIGN"
