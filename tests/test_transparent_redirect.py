from decimal import Decimal

import pytest

from braintree_tr import (
    Braintree,
    EncodingError,
    Environment,
    InvalidSignatureError,
    MalformedQueryError,
    MissingHashError,
    Signer,
)
from braintree_tr.models import (
    CustomerRequest,
    TransactionOptions,
    TransactionRequest,
    TransparentRedirectData,
)


@pytest.fixture()
def transaction_data():
    return TransparentRedirectData(
        redirect_url="http://call.me",
        transaction=TransactionRequest(
            type="sale",
            amount=Decimal("20.00"),
            options=TransactionOptions(submit_for_settlement=True, store_in_vault=True),
            order_id="1541415277280",
            customer=CustomerRequest(id="1234"),
        ),
    )


class TestValidateQueryString:
    def test_query_without_hash_is_an_error(self, tr):
        with pytest.raises(MissingHashError) as excinfo:
            tr.validate_query_string("no-hash")
        assert str(excinfo.value) == "query is incorrect and has no hash parameter"
        assert excinfo.value.error_code == "braintree:tr:missing_hash"

    def test_missing_hash_is_a_malformed_query(self, tr):
        with pytest.raises(MalformedQueryError):
            tr.validate_query_string("braintree=hello")

    def test_invalid_signature_returns_false(self, tr):
        assert tr.validate_query_string("braintree=hello&hash=aaaaabbbbcccc") is False

    def test_valid_signature(self, tr):
        assert tr.validate_query_string(
            "braintree=hello&hash=b20aae7639bef32e77961ab47336c618734c7517"
        ) is True

    def test_leading_question_mark_is_ignored(self, tr):
        assert tr.validate_query_string(
            "?braintree=hello&hash=b20aae7639bef32e77961ab47336c618734c7517"
        ) is True

    def test_tampered_content_returns_false(self, tr):
        assert tr.validate_query_string(
            "braintree=goodbye&hash=b20aae7639bef32e77961ab47336c618734c7517"
        ) is False

    def test_other_credentials_return_false(self):
        tr = Braintree(Environment.SANDBOX, "merch-id", "pub-key", "other-key").transparent_redirect()
        assert tr.validate_query_string(
            "braintree=hello&hash=b20aae7639bef32e77961ab47336c618734c7517"
        ) is False

    def test_empty_hash_returns_false(self, tr):
        assert tr.validate_query_string("braintree=hello&hash=") is False

    def test_repeated_hash_is_malformed(self, tr):
        with pytest.raises(MalformedQueryError) as excinfo:
            tr.validate_query_string(
                "braintree=hello&hash=b20aae7639bef32e77961ab47336c618734c7517&hash=abc"
            )
        assert excinfo.value.error_code == "braintree:tr:malformed_query"

    def test_fields_after_hash_are_malformed(self, tr):
        with pytest.raises(MalformedQueryError):
            tr.validate_query_string(
                "braintree=hello&hash=b20aae7639bef32e77961ab47336c618734c7517&amount=1"
            )

    def test_parameter_ending_in_hash_is_not_the_hash(self, tr):
        with pytest.raises(MissingHashError):
            tr.validate_query_string("braintree=hello&merchant_hash=abc")


class TestParseQueryString:
    def test_returns_fields_without_hash(self, tr):
        query = (
            "http_status=200&id=abc123&kind=create_transaction"
            "&hash=64baf6f6edad6d24ffa3ebda34f797fe0d3b4101"
        )

        assert tr.parse_query_string(query) == {
            "http_status": "200",
            "id": "abc123",
            "kind": "create_transaction",
        }

    def test_invalid_signature_raises(self, tr):
        with pytest.raises(InvalidSignatureError):
            tr.parse_query_string("http_status=200&id=abc123&kind=create_transaction&hash=00")

    def test_missing_hash_raises(self, tr):
        with pytest.raises(MissingHashError):
            tr.parse_query_string("http_status=200")


class TestTransactionData:
    def test_contains_expected_fields(self, tr, transaction_data):
        data = tr.transaction_data(transaction_data)

        assert "kind=create_transaction" in data
        assert "redirect_url=http%3A%2F%2Fcall.me" in data
        assert "transaction%5Bamount%5D=20.00" in data
        assert "transaction%5Border_id%5D=1541415277280" in data
        assert "transaction%5Bcustomer%5D%5Bid%5D=1234" in data
        assert "transaction%5Boptions%5D%5Bsubmit_for_settlement%5D=1" in data
        assert "transaction%5Boptions%5D%5Bstore_in_vault%5D=1" in data

    def test_signature_verifies(self, tr, transaction_data):
        data = tr.transaction_data(transaction_data)

        assert data.count("|") == 1
        content, signature = data.split("|")
        assert Signer("pub-key", "priv-key").verify(content, signature) is True

    def test_fixed_pairs_come_first(self, tr, transaction_data):
        data = tr.transaction_data(transaction_data)
        assert data.startswith("kind=create_transaction&redirect_url=http%3A%2F%2Fcall.me&transaction")

    def test_is_deterministic(self, tr, transaction_data):
        assert tr.transaction_data(transaction_data) == tr.transaction_data(transaction_data)


class TestBuildRequestDescriptor:
    def test_empty_payload_yields_two_pairs(self, tr):
        data = tr.build_request_descriptor("create_transaction", "http://call.me", TransactionRequest())

        assert data == (
            "kind=create_transaction&redirect_url=http%3A%2F%2Fcall.me"
            "|3be35563b0d59ba5e048fb6b8e3da3fd32f931d4"
        )

    def test_no_payload(self, tr):
        data = tr.build_request_descriptor("create_transaction", "http://call.me")
        assert data.split("|")[0] == "kind=create_transaction&redirect_url=http%3A%2F%2Fcall.me"

    def test_explicit_prefix(self, tr):
        data = tr.build_request_descriptor(
            "create_customer",
            "http://call.me",
            CustomerRequest(first_name="Ada Lovelace"),
            prefix="customer",
        )
        assert "customer%5Bfirst_name%5D=Ada%20Lovelace" in data

    def test_payload_without_group_name(self, tr):
        with pytest.raises(EncodingError):
            tr.build_request_descriptor("create_customer", "http://call.me", CustomerRequest(id="1"))

    @pytest.mark.parametrize("kind,redirect_url", [("", "http://call.me"), ("create_transaction", "")])
    def test_requires_kind_and_redirect_url(self, tr, kind, redirect_url):
        with pytest.raises(EncodingError):
            tr.build_request_descriptor(kind, redirect_url)

    def test_encoding_failure_emits_nothing(self, tr):
        payload = TransactionRequest.model_construct(amount=Decimal("1.00"), order_id=2.5)

        with pytest.raises(EncodingError):
            tr.build_request_descriptor("create_transaction", "http://call.me", payload)


class TestGateway:
    def test_form_url(self, client, tr):
        assert tr.form_url() == client.merchant_url() + "/transparent_redirect_requests"

    @pytest.mark.parametrize("environment,expected", [
        (Environment.SANDBOX, "https://api.sandbox.braintreegateway.com:443/merchants/merch-id"),
        (Environment.PRODUCTION, "https://api.braintreegateway.com:443/merchants/merch-id"),
        (Environment.DEVELOPMENT, "http://localhost:3000/merchants/merch-id"),
    ])
    def test_merchant_url(self, environment, expected):
        assert Braintree(environment, "merch-id", "pub-key", "priv-key").merchant_url() == expected

    def test_environment_from_string(self):
        client = Braintree("production", "merch-id", "pub-key", "priv-key")
        assert client.environment is Environment.PRODUCTION

    @pytest.mark.parametrize("merchant_id,public_key,private_key", [
        ("", "pub-key", "priv-key"),
        ("merch-id", "", "priv-key"),
        ("merch-id", "pub-key", ""),
    ])
    def test_requires_credentials(self, merchant_id, public_key, private_key):
        with pytest.raises(ValueError):
            Braintree(Environment.SANDBOX, merchant_id, public_key, private_key)

    def test_repr_hides_keys(self, client):
        assert "priv-key" not in repr(client)
