"""
Gateway Environments

Base URLs for each processor environment. Merchant URLs are derived from these.
"""
from enum import Enum


class Environment(str, Enum):
    DEVELOPMENT = "development"
    SANDBOX = "sandbox"
    PRODUCTION = "production"

    @property
    def base_url(self) -> str:
        return _BASE_URLS[self]


_BASE_URLS = {
    Environment.DEVELOPMENT: "http://localhost:3000",
    Environment.SANDBOX: "https://api.sandbox.braintreegateway.com:443",
    Environment.PRODUCTION: "https://api.braintreegateway.com:443",
}
