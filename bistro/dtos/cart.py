from .base import OpenDocument


class CartItemCreateRequest(OpenDocument):
    """Cart entry stored as posted; ``email`` names the owning user."""
