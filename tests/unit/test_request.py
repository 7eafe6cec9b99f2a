"""Tests for the Request builder's accumulated state (no HTTP)."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from outseta._http import ClientContext, Request
from outseta.errors import UnauthenticatedError


class TestUrl:
    @pytest.mark.parametrize(
        "endpoint",
        ["billing/accounts", "/billing/accounts", "//billing/accounts", "///billing/accounts"],
    )
    def test_leading_slashes_are_stripped(self, make_context, base_url, endpoint):
        request = Request(make_context(), endpoint)

        assert request.url == base_url + "billing/accounts"

    def test_url_is_stable_across_reads(self, make_context):
        request = Request(make_context(), "crm/people")

        assert request.url == request.url

    def test_base_url_gains_trailing_slash(self, make_context):
        context = make_context()
        bare = ClientContext(
            base_url=context.base_url.rstrip("/"),
            user_auth=context.user_auth,
            server_auth=context.server_auth,
            transport=context.transport,
        )

        assert Request(bare, "crm/people").url == context.base_url + "crm/people"


class TestHeaders:
    def test_json_content_type_by_default(self, make_context):
        request = Request(make_context(), "profile")

        assert request.headers == {"Content-Type": "application/json"}

    def test_content_type_override(self, make_context):
        request = Request(make_context(), "profile").with_content_type("text/plain")

        assert request.headers["Content-Type"] == "text/plain"

    def test_headers_property_is_a_copy(self, make_context):
        request = Request(make_context(), "profile")
        request.headers["Authorization"] = "tampered"

        assert "Authorization" not in request.headers


class TestAuthentication:
    def test_as_server(self, make_context):
        request = Request(make_context(api_key="k", secret_key="s"), "crm/people")

        assert request.authenticate_as_server().headers["Authorization"] == "Outseta k:s"

    def test_as_user(self, make_context):
        request = Request(make_context(access_token="t"), "profile")

        assert request.authenticate_as_user().headers["Authorization"] == "bearer t"

    def test_as_server_without_keys_raises(self, make_context):
        with pytest.raises(UnauthenticatedError):
            Request(make_context(access_token="t"), "crm/people").authenticate_as_server()

    def test_as_user_without_token_raises(self, make_context):
        with pytest.raises(UnauthenticatedError):
            Request(make_context(api_key="k", secret_key="s"), "profile").authenticate_as_user()

    @pytest.mark.parametrize(
        "credentials,expected",
        [
            ({"access_token": "t", "api_key": "k", "secret_key": "s"}, "bearer t"),
            ({"access_token": "t"}, "bearer t"),
            ({"api_key": "k", "secret_key": "s"}, "Outseta k:s"),
            ({}, None),
        ],
        ids=["both", "user_only", "server_only", "neither"],
    )
    def test_user_preferred(self, make_context, credentials, expected):
        request = Request(make_context(**credentials), "profile").authenticate_as_user_preferred()

        assert request.headers.get("Authorization") == expected

    @pytest.mark.parametrize(
        "credentials,expected",
        [
            ({"access_token": "t", "api_key": "k", "secret_key": "s"}, "Outseta k:s"),
            ({"access_token": "t"}, "bearer t"),
            ({"api_key": "k", "secret_key": "s"}, "Outseta k:s"),
            ({}, None),
        ],
        ids=["both", "user_only", "server_only", "neither"],
    )
    def test_server_preferred(self, make_context, credentials, expected):
        request = Request(make_context(**credentials), "profile").authenticate_as_server_preferred()

        assert request.headers.get("Authorization") == expected

    def test_header_uses_token_current_at_call_time(self, make_context):
        context = make_context(access_token="old")
        first = Request(context, "profile").authenticate_as_user()
        context.user_auth.access_token = "new"
        second = Request(context, "profile").authenticate_as_user()

        assert first.headers["Authorization"] == "bearer old"
        assert second.headers["Authorization"] == "bearer new"


class TestParams:
    def test_repeated_key_is_appended(self, make_context):
        request = Request(make_context(), "crm/people")
        request.with_params({"a": "1"}).with_params({"a": "2"})

        assert request.params == [("a", "1"), ("a", "2")]

    def test_params_keep_insertion_order(self, make_context):
        request = Request(make_context(), "crm/people").with_params({"fields": "*", "limit": "10"})

        assert request.params == [("fields", "*"), ("limit", "10")]


class TestBody:
    def test_no_body_by_default(self, make_context):
        assert Request(make_context(), "crm/people").body is None

    def test_bodies_merge_with_later_keys_winning(self, make_context):
        request = Request(make_context(), "crm/people")

        request.with_body({"a": 1}).with_body({"b": 2})
        assert json.loads(request.body) == {"a": 1, "b": 2}

        request.with_body({"a": 2})
        assert json.loads(request.body) == {"a": 2, "b": 2}

    def test_nested_objects_are_replaced_not_merged(self, make_context):
        request = (
            Request(make_context(), "billing/subscriptions")
            .with_body({"Plan": {"Uid": "y", "Name": "z"}})
            .with_body({"Plan": {"Uid": "x"}})
        )

        assert json.loads(request.body) == {"Plan": {"Uid": "x"}}

    def test_caller_mapping_is_not_mutated(self, make_context):
        original = {"a": 1}
        Request(make_context(), "crm/people").with_body(original).with_body({"b": 2})

        assert original == {"a": 1}

    def test_datetimes_serialize_as_utc_iso_strings(self, make_context):
        eastern = timezone(timedelta(hours=-5))
        request = Request(make_context(), "billing/usage").with_body(
            {"UsageDate": datetime(2021, 12, 29, 3, 0, 0, 123000, tzinfo=eastern)}
        )

        assert json.loads(request.body) == {"UsageDate": "2021-12-29T08:00:00.123Z"}


class TestMethod:
    def test_method_is_none_before_sending(self, make_context):
        assert Request(make_context(), "crm/people").method is None
