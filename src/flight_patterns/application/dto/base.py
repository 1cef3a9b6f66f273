"""Base DTO class with stable API and clean snake_case format."""
from typing import Any, Dict, Optional, Union
from enum import Enum
from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs with stable API and clean snake_case format.

    Provides stable to_dict()/from_dict() methods so callers such as the CLI
    formatters never touch Pydantic directly.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Stable public API - returns clean snake_case dictionary.

        Returns:
            Dict with snake_case keys (Pythonic format)
        """
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        """
        Stable public API - creates instance from snake_case dictionary.

        Args:
            data: Dictionary with snake_case keys

        Returns:
            New instance of the DTO
        """
        return cls.model_validate(data)

    @staticmethod
    def serialize_enum(value: Union[Enum, str, None]) -> Optional[str]:
        """
        Serialize enum to string value.

        Args:
            value: Enum, string, or None value

        Returns:
            String representation or None
        """
        if value is None:
            return None
        if isinstance(value, Enum):
            return value.value
        return str(value)
