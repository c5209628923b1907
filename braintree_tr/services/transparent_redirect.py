"""
Transparent Redirect Gateway

Builds signed request descriptors (tr_data) for the merchant checkout form and
validates the signed query string the processor appends to the redirect URL.

Descriptor Format:
    kind=<kind>&redirect_url=<url>&<flattened payload>|<hex signature>

Callback Format:
    <result fields>&hash=<hex signature over the result fields>

A missing hash is a structural error (MissingHashError). A hash that does not
match is an ordinary outcome: validate_query_string returns False.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import parse_qsl

from ..exceptions import EncodingError, InvalidSignatureError, MalformedQueryError, MissingHashError
from ..models.transactions import TransparentRedirectData
from .form_encoder import encode_pairs, flatten
from .signature_service import Signer

logger = logging.getLogger(__name__)

KIND_CREATE_TRANSACTION = "create_transaction"
HASH_PARAM = "hash="

# Hidden checkout form field carrying the descriptor
FORM_FIELD = "braintree"


class TransparentRedirectGateway:
    """
    Stateless codec bound to one merchant URL and credential pair.

    Every call is a pure function of its arguments and the signer, so one
    gateway can be shared freely between threads.
    """

    def __init__(self, merchant_url: str, signer: Signer):
        self.merchant_url = merchant_url
        self._signer = signer

    def form_url(self) -> str:
        """URL the checkout form must POST to."""
        return f"{self.merchant_url}/transparent_redirect_requests"

    # ========================================================================
    # Encode Path
    # ========================================================================

    def build_request_descriptor(
        self,
        kind: str,
        redirect_url: str,
        payload: Optional[Any] = None,
        prefix: Optional[str] = None
    ) -> str:
        """
        Build a signed request descriptor.

        Args:
            kind: Server-side operation, e.g. "create_transaction"
            redirect_url: Where the processor sends the browser afterwards
            payload: Model with a wire_fields table, or None
            prefix: Group name for the payload; defaults to payload.wire_root

        Returns:
            "<query string>|<signature>"

        Raises:
            EncodingError: If kind or redirect_url is empty, or the payload
                cannot be flattened. Nothing is emitted in that case.
        """
        if not kind:
            raise EncodingError("Descriptor kind is required")
        if not redirect_url:
            raise EncodingError("Descriptor redirect_url is required", details={"kind": kind})

        pairs = [("kind", kind), ("redirect_url", redirect_url)]

        if payload is not None:
            group = prefix or getattr(payload, "wire_root", None)
            if not group:
                raise EncodingError(
                    f"No group name for payload {type(payload).__name__}",
                    details={"kind": kind}
                )
            pairs.extend(flatten(payload, group))

        content = encode_pairs(pairs)
        signature = self._signer.sign(content)

        logger.debug(f"Built {kind} descriptor with {len(pairs)} fields")

        return f"{content}|{signature}"

    def transaction_data(self, data: TransparentRedirectData) -> str:
        """Build the tr_data descriptor for creating a transaction."""
        return self.build_request_descriptor(
            KIND_CREATE_TRANSACTION,
            data.redirect_url,
            data.transaction,
        )

    # ========================================================================
    # Decode Path
    # ========================================================================

    def _split_query(self, query: str):
        """
        Split a callback query into signed content and claimed signature.

        Raises:
            MissingHashError: No hash parameter
            MalformedQueryError: Several hash parameters, or fields after hash
        """
        if query.startswith("?"):
            query = query[1:]

        params = query.split("&")
        hash_positions = [i for i, param in enumerate(params) if param.startswith(HASH_PARAM)]

        if not hash_positions:
            logger.warning("Transparent redirect callback has no hash parameter")
            raise MissingHashError()
        if len(hash_positions) > 1:
            logger.warning("Transparent redirect callback has more than one hash parameter")
            raise MalformedQueryError(
                "query has more than one hash parameter",
                details={"hash_count": len(hash_positions)}
            )

        index = hash_positions[0]
        if index != len(params) - 1:
            logger.warning("Transparent redirect callback has fields after the hash parameter")
            raise MalformedQueryError("query has unsigned fields after the hash parameter")

        content = "&".join(params[:index])
        claimed_signature = params[index][len(HASH_PARAM):]
        return content, claimed_signature

    def validate_query_string(self, query: str) -> bool:
        """
        Check the signature of a callback query string.

        Args:
            query: Raw query string, with or without a leading "?"

        Returns:
            True if the hash matches the preceding fields, False otherwise

        Raises:
            MissingHashError: If the query has no hash parameter
            MalformedQueryError: If the hash parameter is repeated or not last
        """
        content, claimed_signature = self._split_query(query)
        valid = self._signer.verify(content, claimed_signature)

        if valid:
            logger.info("Transparent redirect callback signature verified")
        else:
            logger.warning("Transparent redirect callback signature mismatch")

        return valid

    def parse_query_string(self, query: str) -> Dict[str, str]:
        """
        Validate a callback query string and return its decoded fields.

        Returns:
            Result fields without the hash, e.g. {"http_status": "200",
            "id": "7ygx2h", "kind": "create_transaction"}

        Raises:
            MissingHashError, MalformedQueryError: Structural problems
            InvalidSignatureError: If the hash does not match
        """
        if not self.validate_query_string(query):
            raise InvalidSignatureError("query hash does not match its content")

        content, _ = self._split_query(query)
        return dict(parse_qsl(content, keep_blank_values=True))
