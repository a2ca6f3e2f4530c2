# -*- coding: utf-8 -*-
"""
LINE webhook signature verification
"""
import base64
import hashlib
import hmac


def compute_signature(channel_secret: str, body: bytes) -> str:
    digest = hmac.new(channel_secret.encode("utf-8"), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


def verify_signature(channel_secret: str, body: bytes, signature: str | None) -> bool:
    """
    Check the X-Line-Signature header against the raw request body

    Args:
        channel_secret: Channel secret of the Messaging API channel
        body: Raw request body, exactly as received
        signature: Value of the X-Line-Signature header

    Returns:
        True if the signature matches
    """
    if not signature:
        return False
    return hmac.compare_digest(compute_signature(channel_secret, body), signature)
