"""
Braintree Client

Holds the environment, merchant id and credential pair for one merchant
and hands out gateways bound to them. Instances are immutable after
construction and safe to share across threads.
"""
import logging
from typing import Optional

from .config import Settings, settings as default_settings
from .environment import Environment
from .services.signature_service import Signer
from .services.transparent_redirect import TransparentRedirectGateway

logger = logging.getLogger(__name__)


class Braintree:
    """Entry point for merchant-side transparent redirect operations."""

    def __init__(
        self,
        environment: Environment,
        merchant_id: str,
        public_key: str,
        private_key: str
    ):
        if not merchant_id:
            raise ValueError("merchant_id is required")
        if not public_key or not private_key:
            raise ValueError("public_key and private_key are required")

        self.environment = Environment(environment)
        self.merchant_id = merchant_id
        self._signer = Signer(public_key, private_key)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Braintree":
        """Build a client from environment-based configuration."""
        settings = settings or default_settings
        logger.info(
            f"Configuring Braintree client for merchant {settings.braintree_merchant_id} "
            f"({settings.braintree_environment})"
        )
        return cls(
            Environment(settings.braintree_environment),
            settings.braintree_merchant_id,
            settings.braintree_public_key,
            settings.braintree_private_key,
        )

    def __repr__(self) -> str:
        return f"Braintree(environment={self.environment.value!r}, merchant_id={self.merchant_id!r})"

    def merchant_url(self) -> str:
        return f"{self.environment.base_url}/merchants/{self.merchant_id}"

    def transparent_redirect(self) -> TransparentRedirectGateway:
        return TransparentRedirectGateway(self.merchant_url(), self._signer)
