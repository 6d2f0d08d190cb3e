"""
Pydantic schema definitions for API payloads.

Request models accept the camelCase field names used by the web
client; response models mirror the shapes the client reads back.
"""
