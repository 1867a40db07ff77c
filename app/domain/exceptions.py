from typing import Any, Dict, Optional


class SeedPipelineError(Exception):
    """
    Base error for failures that abort a seeding run.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})


class GenerationBoundaryError(SeedPipelineError):
    """The text generator could not be reached or returned no usable response."""


class EmbeddingBoundaryError(SeedPipelineError):
    """The embedding provider failed for a batch."""


class PersistenceBoundaryError(SeedPipelineError):
    """The vector store rejected a batch or could not be reached."""
