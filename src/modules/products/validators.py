"""Declarative request validation for the Product routes.

A route's rules are an ordered tuple of ``FieldRules`` chains, each chain
an ordered tuple of ``Rule`` (predicate + message) pairs.  ``validate``
evaluates every rule of every chain, without stopping at the first failure
of a field, and returns the failures in declaration order.  Callers rely
on both the order and the count of the returned errors.

Predicates mirror the coercions of a typical JSON form validator: values
are judged by their string form where the client may send either a number
or a string (``"12.5"`` and ``12.5`` are both numeric).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Tuple

PARAMS = "params"
BODY = "body"

_INT_RE = re.compile(r"[-+]?[0-9]+")
_NUMERIC_RE = re.compile(r"[+-]?(?:[0-9]*[.])?[0-9]+")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return _INT_RE.fullmatch(value) is not None
    return False


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, dict)):
        return bool(value)
    return True


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, (float, Decimal)):
        return Decimal(value).is_finite()
    if isinstance(value, str):
        return _NUMERIC_RE.fullmatch(value) is not None
    return False


def is_positive(value: Any) -> bool:
    if value is None or isinstance(value, (bool, list, dict)):
        return False
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return False
    return number.is_finite() and number > 0


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    if isinstance(value, str):
        return value in _BOOLEAN_STRINGS
    return False


# ---------------------------------------------------------------------------
# Rule structures
# ---------------------------------------------------------------------------


class Rule(NamedTuple):
    predicate: Callable[[Any], bool]
    message: str


class FieldRules(NamedTuple):
    field: str
    location: str
    rules: Tuple[Rule, ...]


class FieldError(NamedTuple):
    field: str
    message: str

    def as_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


def validate(
    rule_set: Tuple[FieldRules, ...],
    params: Optional[Mapping[str, Any]] = None,
    body: Optional[Mapping[str, Any]] = None,
) -> List[FieldError]:
    """Run every rule of ``rule_set`` and collect the failures in order."""
    sources = {PARAMS: params or {}, BODY: body or {}}
    errors: List[FieldError] = []
    for chain in rule_set:
        value = sources[chain.location].get(chain.field)
        for rule in chain.rules:
            if not rule.predicate(value):
                errors.append(FieldError(chain.field, rule.message))
    return errors


# ---------------------------------------------------------------------------
# Route rules
# ---------------------------------------------------------------------------

ID_RULES = FieldRules("id", PARAMS, (Rule(is_int, "Not Valid ID"),))

CREATE_RULES: Tuple[FieldRules, ...] = (
    FieldRules("name", BODY, (Rule(not_empty, "Product Name Must Be Filled"),)),
    FieldRules(
        "price",
        BODY,
        (
            Rule(is_numeric, "Not Valid Value"),
            Rule(not_empty, "Product Price Must Be Filled"),
            Rule(is_positive, "Price Not Valid"),
        ),
    ),
)

REPLACE_RULES: Tuple[FieldRules, ...] = (
    ID_RULES,
    FieldRules("name", BODY, (Rule(not_empty, "Product Name Cant Be Empty"),)),
    FieldRules(
        "price",
        BODY,
        (
            Rule(is_numeric, "Not Valid Value"),
            Rule(not_empty, "Product Price Cant Be Empty"),
            Rule(is_positive, "Price Not Valid"),
        ),
    ),
    FieldRules(
        "availability",
        BODY,
        (Rule(is_boolean, "Not Valid Availability Value"),),
    ),
)

# Keyed by ViewSet action name.
ROUTE_RULES: Dict[str, Tuple[FieldRules, ...]] = {
    "list": (),
    "retrieve": (ID_RULES,),
    "create": CREATE_RULES,
    "update": REPLACE_RULES,
    "partial_update": (ID_RULES,),
    "destroy": (ID_RULES,),
}


def validate_request(
    action: str,
    params: Optional[Mapping[str, Any]] = None,
    body: Any = None,
) -> List[FieldError]:
    """Validate a request for ``action``; a non-object body counts as empty."""
    if not isinstance(body, Mapping):
        body = {}
    return validate(ROUTE_RULES[action], params=params, body=body)
