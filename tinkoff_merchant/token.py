"""Request signing for the Tinkoff acquiring API."""
import math
import hashlib

from decimal import Decimal
from typing import Any, Callable, Mapping


PASSWORD_FIELD = "Password"
TOKEN_FIELD = "Token"


def sha256_hex(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def _is_signable(value: Any) -> bool:
    # bool is a subclass of int, but the server never signs booleans
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def _float_to_str(value: float) -> str:
    """Render *value* the way JSON numbers are printed on the server side.

    Shortest round-trip digits; plain notation while the decimal point
    position is in (-6, 21], exponent notation like ``1e-7`` or ``1.5e+21``
    outside of it.
    """
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        return "0"

    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # position of the decimal point relative to the first digit
    n = exponent + k
    prefix = "-" if value < 0 else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits

    e = n - 1
    exp = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return prefix + digits + exp
    return prefix + digits[0] + "." + digits[1:] + exp


def _to_str(value: str | int | float) -> str:
    if isinstance(value, float):
        return _float_to_str(value)
    return str(value)


def signable_fields(params: Mapping[str, Any]) -> dict[str, str | int | float]:
    """Return the top-level fields of *params* that take part in the token.

    Only strings and numbers are signed. Nested objects (``Receipt``,
    ``DATA``, ``Shops``), lists, booleans and ``None`` are skipped.
    """
    return {key: value for key, value in params.items() if _is_signable(value)}


def generate_token(
    params: Mapping[str, Any],
    password: str,
    hash_func: Callable[[str], str] = sha256_hex,
) -> str:
    """Compute the ``Token`` for *params* signed with the terminal *password*.

    Values of the signable fields plus ``Password`` are concatenated in
    ascending key order and hashed.
    """
    data = signable_fields(params)
    data[PASSWORD_FIELD] = password
    token_str = "".join(_to_str(data[k]) for k in sorted(data))
    return hash_func(token_str)
