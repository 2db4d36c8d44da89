"""LLM integration module"""

from .client import OpenAIGateway
from .prompts import ExtractionPrompt, SchemaGenerationPrompt
from .response import extract_json

__all__ = [
    "OpenAIGateway",
    "ExtractionPrompt",
    "SchemaGenerationPrompt",
    "extract_json",
]
