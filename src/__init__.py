"""
Shopify Collection Inventory Browser

Modules:
    models      - Data models (ProductRecord, PageWindow, ViewState, ...)
    common      - Shared utilities (config loader, logging, errors, text helpers)
    inventory   - Normalization, stock tabs, pagination, search, CSV export
    shopify     - Admin GraphQL client and catalog queries
"""
