from .gemini_client import GeminiImageClient, InlineImage, find_inline_image
from .relay_client import RelayClient

__all__ = ["GeminiImageClient", "InlineImage", "RelayClient", "find_inline_image"]
