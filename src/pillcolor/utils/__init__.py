"""Generic utility modules for pillcolor.

- persistence: JSON load/save of Pydantic models with backups and atomic writes
"""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
