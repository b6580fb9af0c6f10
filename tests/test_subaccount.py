"""Request shape and required-parameter checks for every sub-account endpoint."""

import pytest

from binance_spot.exchange.errors import RequiredParameterError
from conftest import FIXED_TS, expected_signature, sent_params, split_signature, wire

EMAIL = "alice@test.com"

# (method name, HTTP method, path, required params in declared order)
ENDPOINTS = [
    ("create_virtual_sub_account", "POST", "/sapi/v1/sub-account/virtualSubAccount", {"subAccountString": "testaccount"}),
    ("get_sub_account_list", "GET", "/sapi/v1/sub-account/list", {}),
    ("get_sub_account_spot_transfer_history", "GET", "/sapi/v1/sub-account/sub/transfer/history", {}),
    (
        "get_sub_account_futures_transfer_history",
        "GET",
        "/sapi/v1/sub-account/futures/internalTransfer",
        {"email": EMAIL, "futuresType": 1},
    ),
    (
        "sub_account_futures_internal_transfer",
        "POST",
        "/sapi/v1/sub-account/futures/internalTransfer",
        {"fromEmail": EMAIL, "toEmail": "bob@test.com", "futuresType": 2, "asset": "BTC", "amount": 0.5},
    ),
    ("get_sub_account_assets", "GET", "/sapi/v3/sub-account/assets", {"email": EMAIL}),
    ("get_sub_account_spot_summary", "GET", "/sapi/v1/sub-account/spotSummary", {}),
    ("sub_account_deposit_address", "GET", "/sapi/v1/capital/deposit/subAddress", {"email": EMAIL, "coin": "USDT"}),
    ("sub_account_deposit_history", "GET", "/sapi/v1/capital/deposit/subHisrec", {"email": EMAIL}),
    ("sub_account_status", "GET", "/sapi/v1/sub-account/status", {}),
    ("sub_account_enable_margin", "POST", "/sapi/v1/sub-account/margin/enable", {"email": EMAIL}),
    ("sub_account_margin_account", "GET", "/sapi/v1/sub-account/margin/account", {"email": EMAIL}),
    ("sub_account_margin_account_summary", "GET", "/sapi/v1/sub-account/margin/accountSummary", {}),
    ("sub_account_enable_futures", "POST", "/sapi/v1/sub-account/futures/enable", {"email": EMAIL}),
    (
        "sub_account_futures_account",
        "GET",
        "/sapi/v2/sub-account/futures/account",
        {"email": EMAIL, "futuresType": 1},
    ),
    ("sub_account_futures_account_summary", "GET", "/sapi/v2/sub-account/futures/accountSummary", {"futuresType": 2}),
    (
        "sub_account_futures_position_risk",
        "GET",
        "/sapi/v2/sub-account/futures/positionRisk",
        {"email": EMAIL, "futuresType": 1},
    ),
    (
        "sub_account_futures_transfer",
        "POST",
        "/sapi/v1/sub-account/futures/transfer",
        {"email": EMAIL, "asset": "USDT", "amount": 10.25, "type": 1},
    ),
    (
        "sub_account_margin_transfer",
        "POST",
        "/sapi/v1/sub-account/margin/transfer",
        {"email": EMAIL, "asset": "USDT", "amount": 10, "type": 2},
    ),
    (
        "sub_account_transfer_to_sub",
        "POST",
        "/sapi/v1/sub-account/transfer/subToSub",
        {"toEmail": EMAIL, "asset": "BNB", "amount": "1.1"},
    ),
    ("sub_account_transfer_to_master", "POST", "/sapi/v1/sub-account/transfer/subToMaster", {"asset": "BNB", "amount": 3}),
    ("sub_account_transfer_sub_account_history", "GET", "/sapi/v1/sub-account/transfer/subUserHistory", {}),
    (
        "universal_transfer",
        "POST",
        "/sapi/v1/sub-account/universalTransfer",
        {"fromAccountType": "SPOT", "toAccountType": "USDT_FUTURE", "asset": "USDT", "amount": 100},
    ),
    ("universal_transfer_history", "GET", "/sapi/v1/sub-account/universalTransfer", {}),
    ("sub_account_enable_blvt", "POST", "/sapi/v1/sub-account/blvt/enable", {"email": EMAIL, "enableBlvt": True}),
    (
        "deposit_to_sub_account",
        "POST",
        "/sapi/v1/managed-subaccount/deposit",
        {"toEmail": EMAIL, "asset": "BTC", "amount": 0.01},
    ),
    ("sub_account_asset_details", "GET", "/sapi/v1/managed-subaccount/asset", {"email": EMAIL}),
    (
        "withdraw_from_sub_account",
        "POST",
        "/sapi/v1/managed-subaccount/withdraw",
        {"fromEmail": EMAIL, "asset": "BTC", "amount": 0.01},
    ),
]

MISSING_CASES = [
    (name, required, param)
    for name, _method, _path, required in ENDPOINTS
    for param in required
]


@pytest.mark.parametrize("name,http_method,path,required", ENDPOINTS, ids=[e[0] for e in ENDPOINTS])
def test_endpoint_sends_one_signed_request(client, exchange, name, http_method, path, required):
    result = getattr(client, name)(**required, recvWindow=5000)

    assert result == {"success": True}
    assert len(exchange.requests) == 1
    request = exchange.last
    assert request.method == http_method
    assert request.url.path == path

    payload, signature = split_signature(request)
    assert signature == expected_signature(payload)
    expected = {"recvWindow": "5000"}
    expected.update({key: wire(value) for key, value in required.items()})
    expected.update({"timestamp": str(FIXED_TS), "signature": signature})
    assert sent_params(request) == expected


@pytest.mark.parametrize("name,required,param", MISSING_CASES, ids=[f"{c[0]}-{c[2]}" for c in MISSING_CASES])
def test_empty_required_parameter_is_rejected(client, exchange, name, required, param):
    args = dict(required)
    args[param] = ""
    with pytest.raises(RequiredParameterError) as excinfo:
        getattr(client, name)(**args)
    assert excinfo.value.param == param
    assert exchange.requests == []


@pytest.mark.parametrize("name,required,param", MISSING_CASES, ids=[f"{c[0]}-{c[2]}" for c in MISSING_CASES])
def test_omitted_required_parameter_is_rejected(client, exchange, name, required, param):
    args = {key: value for key, value in required.items() if key != param}
    with pytest.raises(RequiredParameterError) as excinfo:
        getattr(client, name)(**args)
    assert excinfo.value.param == param
    assert exchange.requests == []


def test_create_virtual_sub_account_with_empty_string(client, exchange):
    with pytest.raises(RequiredParameterError) as excinfo:
        client.create_virtual_sub_account(subAccountString="")
    assert excinfo.value == RequiredParameterError("subAccountString")
    assert exchange.requests == []


def test_sub_account_futures_transfer_scenario(client, exchange):
    client.sub_account_futures_transfer(email="a@b.com", asset="BTC", amount=1.5, type=2)

    request = exchange.last
    assert request.method == "POST"
    assert request.url.path == "/sapi/v1/sub-account/futures/transfer"
    payload, signature = split_signature(request)
    assert payload == f"email=a%40b.com&asset=BTC&amount=1.5&type=2&timestamp={FIXED_TS}"
    assert signature == expected_signature(payload)


def test_get_sub_account_list_without_arguments(client, exchange):
    client.get_sub_account_list()

    request = exchange.last
    assert request.method == "GET"
    assert request.url.path == "/sapi/v1/sub-account/list"
    assert list(sent_params(request)) == ["timestamp", "signature"]


def test_optional_parameters_are_forwarded(client, exchange):
    client.universal_transfer_history(fromEmail="alice@test.com", startTime=1600000000000, limit=500)
    params = sent_params(exchange.last)
    assert params["fromEmail"] == "alice@test.com"
    assert params["startTime"] == "1600000000000"
    assert params["limit"] == "500"


def test_zero_and_false_count_as_present(client, exchange):
    client.sub_account_enable_blvt(email=EMAIL, enableBlvt=False)
    assert sent_params(exchange.last)["enableBlvt"] == "false"


def test_response_is_returned_unmodified(client, exchange):
    exchange.payload = {"subAccounts": [{"email": EMAIL, "isFreeze": False}]}
    assert client.get_sub_account_list() == {"subAccounts": [{"email": EMAIL, "isFreeze": False}]}
