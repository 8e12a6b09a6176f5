"""
Web applications for the lookup system.

- lookup_api: FastAPI service exposing single-word Oxford lookups
"""
