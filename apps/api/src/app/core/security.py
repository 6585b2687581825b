"""
Payment Signature Verification

Razorpay signs a successful checkout with HMAC-SHA256 over
"<order_id>|<payment_id>" keyed with the account secret. The signature is the
only proof that a payment confirmation came from the gateway, so nothing that
completes an enrollment may run before it verifies.
"""

import hashlib
import hmac


def sign_payment(order_id: str, payment_id: str, secret: str) -> str:
    """
    Compute the expected signature for a payment confirmation.

    Args:
        order_id: Gateway order ID
        payment_id: Gateway payment ID
        secret: Shared account secret

    Returns:
        Hex-encoded HMAC-SHA256 digest
    """
    message = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def verify_payment_signature(
    order_id: str,
    payment_id: str,
    signature: str,
    secret: str,
) -> bool:
    """
    Check a payment confirmation signature.

    The comparison is an exact match on the hex digest: no case folding,
    no whitespace trimming.

    Args:
        order_id: Gateway order ID
        payment_id: Gateway payment ID
        signature: Signature supplied by the client
        secret: Shared account secret

    Returns:
        True if the signature matches, False otherwise
    """
    expected = sign_payment(order_id, payment_id, secret)
    # Compare bytes: compare_digest rejects non-ASCII str arguments
    return hmac.compare_digest(expected.encode(), signature.encode())
