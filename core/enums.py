"""Core enumerations for Structify"""

from enum import Enum


class FieldType(str, Enum):
    """Value types a schema field may declare"""
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class RowFailurePolicy(str, Enum):
    """What to do when a single input row cannot be converted"""
    STRICT = "strict"
    LENIENT = "lenient"


class PromptStyle(str, Enum):
    """How the model is asked for JSON"""
    CONSTRAINED = "constrained"
    FREE_TEXT = "free_text"


class CredentialScope(str, Enum):
    """Where the API key property is persisted"""
    USER = "user"
    PROJECT = "project"
