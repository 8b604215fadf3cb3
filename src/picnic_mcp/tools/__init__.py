"""Tools package for MCP server.

Contains MCP tool registration modules:
- ``catalog``: Search Picnic products
- ``cart``: Show and change the shopping cart
- ``account``: Account profile, deliveries and delivery slots
- ``common``: Shared utilities for tool registration
"""
