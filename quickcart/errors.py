"""
Common Error Constants

Centralized error messages shared by the state manager and the routers.
"""

# Product identifier errors
ERROR_INVALID_PRODUCT_ID = "product_id must be a non-empty string of letters, digits, '_' or '-'"
ERROR_PRODUCT_ID_TOO_LONG = "product_id is too long"

# Quantity errors
ERROR_INVALID_QUANTITY = "quantity must be a non-negative integer"

# Price errors
ERROR_INVALID_PRICE = "price must be a non-negative amount"

# Storage errors
ERROR_CORRUPT_SNAPSHOT = "Cart snapshot is corrupt"

# Catalog errors
ERROR_CATALOG_UNAVAILABLE = "Catalog endpoint unavailable"
ERROR_CATALOG_MALFORMED = "Catalog response is malformed"

# Generic errors
ERROR_STATE_NOT_READY = "Application state is not initialized"
