"""Declarative request validation.

A rule is a ``(location, field, predicate, message)`` tuple.  ``location``
is ``"params"`` for URL keyword arguments or ``"body"`` for the parsed
request body.  Rules are evaluated in declaration order and never stop
early: every failed rule contributes one violation, so a request with
several problems reports all of them at once.

``handle_input_errors`` is the only place that turns violations into a
response (HTTP 400, ``{"errors": [...]}``).  The ``validate`` decorator
wires rules, gate and handler together for DRF view methods::

    @validate(ID_RULES)
    def retrieve(self, request, id=None):
        ...
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from functools import wraps
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional

import structlog
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

PARAMS = "params"
BODY = "body"

_MISSING = object()

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[-+]?([0-9]*[.])?[0-9]+$")
_BOOLEAN_STRINGS = frozenset({"true", "false", "1", "0"})


class Rule(NamedTuple):
    location: str
    field: str
    predicate: Callable[[Any], bool]
    message: str


Violation = Dict[str, Any]


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(_INT_RE.match(value))


def not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return _is_number(value) or isinstance(value, bool)


def is_numeric(value: Any) -> bool:
    if _is_number(value):
        return Decimal(str(value)).is_finite()
    return isinstance(value, str) and bool(_NUMERIC_RE.match(value))


def is_positive(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (str, int, float, Decimal)):
        return False
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return False
    return number.is_finite() and number > 0


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    return isinstance(value, str) and value in _BOOLEAN_STRINGS


# ---------------------------------------------------------------------------
# Rule runner
# ---------------------------------------------------------------------------


def _lookup(source: Any, field: str) -> Any:
    if hasattr(source, "get"):
        return source.get(field, _MISSING)
    return _MISSING


def run_rules(
    rules: Iterable[Rule], params: Dict[str, Any], body: Any
) -> List[Violation]:
    """Evaluate every rule and return the accumulated violations."""
    sources = {PARAMS: params, BODY: body}
    errors: List[Violation] = []
    for rule in rules:
        raw = _lookup(sources[rule.location], rule.field)
        value = None if raw is _MISSING else raw
        if rule.predicate(value):
            continue
        error: Violation = {"type": "field"}
        if raw is not _MISSING:
            error["value"] = raw
        error["msg"] = rule.message
        error["path"] = rule.field
        error["location"] = rule.location
        errors.append(error)
    return errors


# ---------------------------------------------------------------------------
# Gate
# ---------------------------------------------------------------------------


def handle_input_errors(errors: List[Violation]) -> Optional[Response]:
    """Return a 400 response when ``errors`` is non-empty, else ``None``."""
    if errors:
        logger.info(
            "request_validation_failed",
            error_count=len(errors),
            fields=[error["path"] for error in errors],
        )
        return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)
    return None


def validate(*rule_lists: Iterable[Rule]) -> Callable:
    """Decorate a view method with rules followed by the error gate.

    Rule lists are concatenated in the order given.  URL keyword arguments
    are the ``params`` source and ``request.data`` is the ``body`` source.
    """
    rules = [rule for rule_list in rule_lists for rule in rule_list]

    def decorator(view_method: Callable) -> Callable:
        @wraps(view_method)
        def wrapper(self, request: Request, *args, **kwargs) -> Response:
            errors = run_rules(rules, kwargs, request.data)
            response = handle_input_errors(errors)
            if response is not None:
                return response
            return view_method(self, request, *args, **kwargs)

        return wrapper

    return decorator
