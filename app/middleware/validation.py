"""
Declarative request validation

Rule sets are plain data: a tuple of FieldRule descriptors, each naming a
field, where it lives in the request, and an ordered chain of steps. A step
is either a Check (a predicate plus the message reported when it fails) or a
sanitizer (a function that rewrites the value). One interpreter, run_rules,
evaluates any rule set; validate_request turns rule sets into a FastAPI
dependency that short-circuits the request with ValidationFailedError.
"""
import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from itertools import chain
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple, Type, Union

from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from app.exceptions import ValidationFailedError

logger = logging.getLogger(__name__)

BODY = "body"
PATH = "path"

_MISSING = object()

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# YYYY-MM-DD with optional THH:MM[:SS[.ffffff]] and Z or ±HH[:]MM offset
_ISO_DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{1,6})?)?(?:[Zz]|[+-]\d{2}:?\d{2})?)?$"
)

_DATETIME_ADAPTER = TypeAdapter(datetime)

_ESCAPES = {
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#x27;",
    "<": "&lt;",
    ">": "&gt;",
    "/": "&#x2F;",
    "\\": "&#x5C;",
    "`": "&#96;",
}


@dataclass(frozen=True)
class Check:
    """A predicate over a field value and the message reported when it fails"""
    test: Callable[[Any], bool]
    message: str


Sanitizer = Callable[[Any], Any]
Step = Union[Check, Sanitizer]


@dataclass(frozen=True)
class FieldRule:
    """
    Validation rule for a single request field.

    Attributes:
        field: Field name (JSON key or path parameter)
        steps: Checks and sanitizers, applied in order
        location: BODY or PATH
        optional: Skip the rule when the field is absent
        nullable: Accept an explicit null without running the steps
        label: Key used in error entries, defaults to field
    """
    field: str
    steps: Tuple[Step, ...] = ()
    location: str = BODY
    optional: bool = False
    nullable: bool = False
    label: str | None = None


# Checks

def not_empty(message: str) -> Check:
    return Check(lambda value: isinstance(value, str) and value != "", message)


def is_string(message: str) -> Check:
    return Check(lambda value: isinstance(value, str), message)


def is_in(enum_class: Type[Enum], message: str) -> Check:
    allowed = frozenset(member.value for member in enum_class)
    return Check(lambda value: isinstance(value, str) and value in allowed, message)


def is_uuid(message: str) -> Check:
    return Check(lambda value: isinstance(value, str) and bool(_UUID_PATTERN.match(value)), message)


def _parses_as_datetime(value: Any) -> bool:
    # Numeric strings would otherwise be read as unix timestamps by pydantic
    if not isinstance(value, str) or not _ISO_DATETIME_PATTERN.match(value):
        return False
    try:
        _DATETIME_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def is_iso_datetime(message: str) -> Check:
    return Check(_parses_as_datetime, message)


# Sanitizers (non-string values pass through untouched)

def trim(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def escape(value: Any) -> Any:
    """Replace HTML-significant characters with entities"""
    if not isinstance(value, str):
        return value
    return "".join(_ESCAPES.get(char, char) for char in value)


def _run_steps(rule: FieldRule, value: Any) -> Tuple[Any, str | None]:
    for step in rule.steps:
        if isinstance(step, Check):
            if not step.test(value):
                return value, step.message
        else:
            value = step(value)
    return value, None


def run_rules(
    rules: Iterable[FieldRule],
    body: Mapping[str, Any],
    path_params: Mapping[str, Any] | None = None,
) -> Tuple[Dict[str, Any], List[Dict[str, str]]]:
    """
    Evaluate a rule set against a request.

    Args:
        rules: FieldRule descriptors, evaluated in order
        body: Parsed JSON body
        path_params: Path parameters of the matched route

    Returns:
        (sanitized body fields named by the rules, list of {field: message} errors)
    """
    path_params = path_params or {}
    cleaned: Dict[str, Any] = {}
    errors: List[Dict[str, str]] = []

    for rule in rules:
        source = path_params if rule.location == PATH else body
        value = source.get(rule.field, _MISSING)

        if value is _MISSING:
            if rule.optional:
                continue
            value = None
        elif value is None and rule.nullable:
            if rule.location == BODY:
                cleaned[rule.field] = None
            continue

        value, message = _run_steps(rule, value)
        if message is not None:
            errors.append({rule.label or rule.field: message})
        elif rule.location == BODY:
            cleaned[rule.field] = value

    return cleaned, errors


async def _read_body(request: Request) -> Tuple[Dict[str, Any], List[Dict[str, str]]]:
    raw = await request.body()
    if not raw:
        return {}, []
    try:
        body = json.loads(raw)
    except ValueError:
        return {}, [{"general": "Request body must be valid JSON"}]
    if not isinstance(body, dict):
        return {}, [{"general": "Request body must be a JSON object"}]
    return body, []


def validate_request(*rule_sets: Iterable[FieldRule]):
    """
    Build a FastAPI dependency that validates the request against rule sets.

    The dependency returns the sanitized body fields. On any failure it
    raises ValidationFailedError, so the endpoint never runs.

    Usage:
        @router.post("")
        async def create(data: dict = Depends(validate_request(CREATE_RULES))):
            ...
    """
    rules = tuple(chain.from_iterable(rule_sets))
    reads_body = any(rule.location == BODY for rule in rules)

    async def dependency(request: Request) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        body_errors: List[Dict[str, str]] = []
        if reads_body:
            body, body_errors = await _read_body(request)

        cleaned, errors = run_rules(rules, body, request.path_params)
        errors = body_errors + errors
        if errors:
            logger.info(f"Request validation failed for {request.method} {request.url.path}: {errors}")
            raise ValidationFailedError(errors)
        return cleaned

    return dependency
