"""Console chat client with typed, validated prompts."""

from .console_input import get_input

__version__ = "0.1.0"

__all__ = ["get_input", "__version__"]
