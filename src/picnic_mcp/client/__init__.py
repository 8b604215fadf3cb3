"""Client package for the Picnic MCP server.

Provides lifecycle management for the wrapped Picnic API client:
- ``picnic_client``: Process-wide authenticated client with initialize/get/reset
"""
