import hashlib

import pytest

from tinkoff_merchant.token import generate_token, signable_fields, sha256_hex


AMOUNT_ORDER_TOKEN = "f9c01c06a38d8ec2e9e0f91ebd1a23f14d9a3e35763a9b559f3647fb8e82ebf2"


def test_known_token():
    assert generate_token({"Amount": 100, "OrderId": "A1"}, "pwd") == AMOUNT_ORDER_TOKEN


def test_known_token_with_cyrillic_description():
    params = {
        "TerminalKey": "1716210903613",
        "Amount": 1000,
        "OrderId": "ORDER-1",
        "Description": "Пополнение баланса",
    }
    assert generate_token(params, "secret") == (
        "e5ba8f415fcb6c8e1f094dc17de55825b1fd695474eaedde616bbbb387798feb"
    )


def test_token_is_deterministic():
    params = {"Amount": 100, "OrderId": "A1", "Description": "test"}
    assert generate_token(params, "pwd") == generate_token(params, "pwd")


def test_field_order_does_not_matter():
    first = {"Amount": 100, "OrderId": "A1", "Description": "test"}
    second = {"Description": "test", "OrderId": "A1", "Amount": 100}
    assert generate_token(first, "pwd") == generate_token(second, "pwd")


@pytest.mark.parametrize("extra", [
    {"Items": [{"Name": "Pen", "Price": 100}]},
    {"Receipt": {"Taxation": "osn", "Items": []}},
    {"DATA": {"Email": "a@b.c"}},
    {"Recurrent": None},
    {"Success": True},
])
def test_non_scalar_fields_are_excluded(extra):
    params = {"Amount": 100, "OrderId": "A1", **extra}
    assert generate_token(params, "pwd") == AMOUNT_ORDER_TOKEN


def test_integral_float_signed_as_integer():
    assert generate_token({"Amount": 100.0, "OrderId": "A1"}, "pwd") == AMOUNT_ORDER_TOKEN


def test_changed_value_changes_token():
    assert generate_token({"Amount": 101, "OrderId": "A1"}, "pwd") != AMOUNT_ORDER_TOKEN
    assert generate_token({"Amount": 100, "OrderId": "A2"}, "pwd") != AMOUNT_ORDER_TOKEN
    assert generate_token({"Amount": 100, "OrderId": "A1"}, "pwe") != AMOUNT_ORDER_TOKEN


def test_keys_sorted_case_sensitive():
    seen = []

    def record(value):
        seen.append(value)
        return value

    # "IP" < "Password" < "amount" in code-point order
    generate_token({"amount": "x", "IP": "1.2.3.4"}, "pwd", hash_func=record)
    assert seen == ["1.2.3.4pwdx"]


def test_empty_string_and_empty_password():
    seen = []
    generate_token({"A": "", "B": "b"}, "", hash_func=lambda s: seen.append(s) or s)
    assert seen == ["b"]
    assert generate_token({}, "pwd") == hashlib.sha256(b"pwd").hexdigest()


def test_signable_fields():
    params = {
        "Amount": 100,
        "Quantity": 1.5,
        "OrderId": "A1",
        "Success": False,
        "Receipt": {},
        "Shops": [],
        "IP": None,
    }
    assert signable_fields(params) == {"Amount": 100, "Quantity": 1.5, "OrderId": "A1"}


def test_sha256_hex():
    assert sha256_hex("pwd") == "a1159e9df3670d549d04524532629f5477ceb7deec9b45e47e8c009506ecb2c8"


@pytest.mark.parametrize("value, expected", [
    (1.5, "1.5"),
    (-0.25, "-0.25"),
    (123.456, "123.456"),
    (-0.0, "0"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (1.5e-7, "1.5e-7"),
    (1e16, "10000000000000000"),
    (1e21, "1e+21"),
    (1.5e21, "1.5e+21"),
])
def test_float_rendering(value, expected):
    seen = []
    generate_token({"Amount": value}, "", hash_func=lambda s: seen.append(s) or s)
    assert seen == [expected]
