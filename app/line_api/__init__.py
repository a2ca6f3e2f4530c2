from .client import LineMessagingClient
from .signature import verify_signature

__all__ = ["LineMessagingClient", "verify_signature"]
