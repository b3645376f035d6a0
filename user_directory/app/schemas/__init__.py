"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored ``UserRecord`` dataclass to
decouple the API representation from storage.
"""
