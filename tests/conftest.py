import pytest

from braintree_tr import Braintree, Environment


@pytest.fixture()
def client():
    return Braintree(Environment.SANDBOX, "merch-id", "pub-key", "priv-key")


@pytest.fixture()
def tr(client):
    return client.transparent_redirect()
