"""Abstract base classes for Structify components"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class LLMTask(ABC):
    """Abstract base class for LLM-powered tasks"""

    @property
    @abstractmethod
    def prompt_template(self) -> str:
        """Prompt template for this task"""
        pass

    @abstractmethod
    def build_prompt(self, context: dict) -> str:
        """Build system prompt from context"""
        pass

    @abstractmethod
    def response_format(self, context: dict) -> dict:
        """Constrained decoding payload for this task"""
        pass

    @abstractmethod
    def parse_response(self, response: Any) -> Any:
        """Parse LLM response into structured data"""
        pass


class ModelGateway(ABC):
    """A model call: (system prompt, user text, optional constraint) -> output"""

    @abstractmethod
    def invoke(
        self,
        system_prompt: str,
        user_text: str,
        response_format: Optional[dict] = None
    ) -> Any:
        """
        Run one completion.

        Returns the reply text when no constraint is given, otherwise the
        decoded JSON value.
        """
        pass


class PropertyStore(ABC):
    """Persistent key-value store owned by the host"""

    @abstractmethod
    def get_property(self, key: str) -> Optional[str]:
        """Return the stored value or None"""
        pass

    @abstractmethod
    def set_property(self, key: str, value: str) -> None:
        """Store a value"""
        pass
