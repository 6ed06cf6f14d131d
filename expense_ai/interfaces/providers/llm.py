from abc import ABC, abstractmethod
from typing import Optional


class LLMProvider(ABC):
    """Interface for generative language model providers."""

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        model: Optional[str] = None,
        response_mime_type: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Generate text for a single prompt.

        Args:
            prompt: The prompt text
            model: Optional model override
            response_mime_type: Constrain the response format, e.g. "application/json"
            temperature: Optional sampling temperature

        Returns:
            The raw response text

        Raises:
            GenerationError: if no usable text was produced
        """
        pass
