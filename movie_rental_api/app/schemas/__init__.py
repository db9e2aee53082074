"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain records in ``models`` so that
internal fields such as password hashes never reach the API.
"""
