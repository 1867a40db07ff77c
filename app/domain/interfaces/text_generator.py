from typing import Protocol


class ITextGenerator(Protocol):
    """Free-text generator. Output is untrusted and may not be JSON at all."""

    async def invoke(self, prompt: str) -> str: ...
