"""
Pydantic schema definitions for API payloads and stored records.

Each resource (lifestyle, medical history) defines its own models.
The same models are used by the repositories, which map them to and
from table rows.
"""
