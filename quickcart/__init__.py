"""
QuickCart Core Module

This package contains the storefront state components:
- catalog: seed products and the products endpoint client
- cart: cart mapping, snapshot storage and the application state
- auth: identity provider helpers
- routers: FastAPI routes over the application state
"""
