"""
Signature Service for Transparent Redirect Payloads

Implements HMAC-SHA1 signature generation and verification.
The HMAC key is the SHA-1 digest of the private key, matching the processor.
"""
import hmac
import hashlib


class Signer:
    """
    Signs and verifies transparent redirect content with a credential pair.

    The public key identifies the merchant to the processor; only the
    private key takes part in the HMAC. Neither is exposed by repr().
    """

    def __init__(self, public_key: str, private_key: str):
        self._public_key = public_key
        self._hmac_key = hashlib.sha1(private_key.encode('utf-8')).digest()

    @property
    def public_key(self) -> str:
        return self._public_key

    def __repr__(self) -> str:
        return "Signer(public_key='***', private_key='***')"

    def sign(self, content: str) -> str:
        """
        Sign content using HMAC-SHA1.

        Args:
            content: Exact string to sign (query string without signature)

        Returns:
            40 character lowercase hex digest
        """
        return hmac.new(
            self._hmac_key,
            content.encode('utf-8'),
            hashlib.sha1
        ).hexdigest()

    def verify(self, content: str, claimed_signature: str) -> bool:
        """
        Verify a claimed signature using constant-time comparison.

        Args:
            content: String the signature should cover
            claimed_signature: Hex digest received from the other side

        Returns:
            True if signature valid, False otherwise
        """
        expected_signature = self.sign(content)

        # Constant-time comparison
        return hmac.compare_digest(
            expected_signature.encode('utf-8'),
            claimed_signature.encode('utf-8')
        )
