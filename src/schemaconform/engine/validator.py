"""Instance validation with optional data transformation modes.

Validation with modes runs in two passes over a copy of the instance. The
transform pass uses jsonschema keyword functions extended to rewrite the
instance in place, so transforms follow ``$ref`` the way validation does;
its errors are discarded. The stock validator for the dialect then judges
the transformed instance, so the verdict does not depend on keyword order.

Branches of ``anyOf``, ``oneOf``, ``not`` and ``if`` are transformed on a
copy that is written back only when the branch validates.
"""

from __future__ import annotations

import copy
import re
from functools import lru_cache
from typing import Any, Callable, Dict, Iterator, List, Tuple, Type

from jsonschema.exceptions import ValidationError, best_match
from jsonschema.protocols import Validator as ValidatorProtocol
from jsonschema.validators import extend
from referencing.exceptions import Unresolvable

from .casting import cast_to_schema
from .exceptions import EngineError, ValidationException
from .registry import registry_for
from .schema import Schema

MODE_NONE = 0
MODE_CAST = 1
MODE_REMOVE_ADDITIONALS = 2

Keyword = Callable[[Any, Any, Any, Dict[str, Any]], Iterator[ValidationError]]


class Validator:
    """Validates instances against a :class:`Schema` under a mode bitmask."""

    def __init__(self, mode: int = MODE_NONE, *, allow_network: bool = False) -> None:
        self.mode = int(mode)
        self.allow_network = allow_network

    def validate(self, instance: Any, schema: Schema) -> Any:
        """Return the (possibly transformed) instance or raise.

        The caller's ``instance`` is never modified.
        """

        working = copy.deepcopy(instance)
        registry = registry_for(self.allow_network)
        checker = schema.validator_class(
            schema.raw,
            registry=registry,
            format_checker=schema.validator_class.FORMAT_CHECKER,
        )
        if self.mode & MODE_CAST:
            working = cast_to_schema(working, schema.raw)

        try:
            if self.mode:
                # Transform pass; the verdict comes from the stock validator below.
                transformer = mode_validator_class(schema.validator_class, self.mode)(
                    schema.raw, registry=registry, format_checker=checker.format_checker
                )
                _drain(transformer.iter_errors(working))
            error = best_match(checker.iter_errors(working))
        except Unresolvable as exc:
            reference = getattr(exc, "ref", None) or str(exc)
            raise EngineError(f'Unknown reference "{reference}"') from exc

        if error is not None:
            raise ValidationException(error.message, path=error.json_path)
        return working


@lru_cache(maxsize=None)
def mode_validator_class(
    base: Type[ValidatorProtocol], mode: int
) -> Type[ValidatorProtocol]:
    if not mode:
        return base

    keywords = base.VALIDATORS
    overrides: Dict[str, Keyword] = {}
    for name, factory in _KEYWORD_WRAPPERS.items():
        if name in keywords:
            overrides[name] = factory(keywords[name], mode)
    return extend(base, validators=overrides)


def _drain(errors: Iterator[ValidationError]) -> None:
    for _ in errors:
        pass


def _settle(validator: Any, instance: Any, schema: Any) -> bool:
    """Transform ``instance`` in place for ``schema``, then report whether it validates."""

    _drain(validator.descend(instance, schema))
    return next(iter(validator.descend(instance, schema)), None) is None


def _trial(validator: Any, instance: Any, schema: Any) -> Tuple[bool, Any]:
    candidate = copy.deepcopy(instance)
    return _settle(validator, candidate, schema), candidate


def _write_back(target: Any, source: Any) -> None:
    if isinstance(target, dict) and isinstance(source, dict):
        target.clear()
        target.update(source)
    elif isinstance(target, list) and isinstance(source, list):
        target[:] = source


def _additional_keys(instance: Dict[str, Any], schema: Dict[str, Any]) -> List[str]:
    properties = schema.get("properties", {})
    patterns = schema.get("patternProperties", {})
    extras = []
    for key in instance:
        if key in properties:
            continue
        if any(re.search(pattern, key) for pattern in patterns):
            continue
        extras.append(key)
    return extras


def _is_2020_dialect(validator: Any) -> bool:
    return "prefixItems" in validator.VALIDATORS


def _wrap_properties(original: Keyword, mode: int) -> Keyword:
    def properties(validator, properties, instance, schema):
        if mode & MODE_CAST and validator.is_type(instance, "object"):
            for name, subschema in properties.items():
                if name in instance:
                    instance[name] = cast_to_schema(instance[name], subschema)
        yield from original(validator, properties, instance, schema)

    return properties


def _wrap_pattern_properties(original: Keyword, mode: int) -> Keyword:
    def patternProperties(validator, patterns, instance, schema):
        if mode & MODE_CAST and validator.is_type(instance, "object"):
            for pattern, subschema in patterns.items():
                for key in list(instance):
                    if re.search(pattern, key):
                        instance[key] = cast_to_schema(instance[key], subschema)
        yield from original(validator, patterns, instance, schema)

    return patternProperties


def _wrap_additional_properties(original: Keyword, mode: int) -> Keyword:
    def additionalProperties(validator, additional, instance, schema):
        if validator.is_type(instance, "object"):
            if mode & MODE_CAST and isinstance(additional, dict):
                for key in _additional_keys(instance, schema):
                    instance[key] = cast_to_schema(instance[key], additional)
            if mode & MODE_REMOVE_ADDITIONALS:
                for key in _additional_keys(instance, schema):
                    if additional is False:
                        del instance[key]
                    elif isinstance(additional, dict):
                        valid, candidate = _trial(validator, instance[key], additional)
                        if valid:
                            instance[key] = candidate
                        else:
                            del instance[key]
        yield from original(validator, additional, instance, schema)

    return additionalProperties


def _wrap_items(original: Keyword, mode: int) -> Keyword:
    def items(validator, items, instance, schema):
        if validator.is_type(instance, "array"):
            start = len(schema.get("prefixItems", [])) if _is_2020_dialect(validator) else 0
            if mode & MODE_CAST:
                if isinstance(items, list):
                    for index, subschema in enumerate(items[: len(instance)]):
                        instance[index] = cast_to_schema(instance[index], subschema)
                elif isinstance(items, dict):
                    for index in range(start, len(instance)):
                        instance[index] = cast_to_schema(instance[index], items)
            if mode & MODE_REMOVE_ADDITIONALS and items is False and _is_2020_dialect(validator):
                del instance[start:]
        yield from original(validator, items, instance, schema)

    return items


def _wrap_prefix_items(original: Keyword, mode: int) -> Keyword:
    def prefixItems(validator, prefix, instance, schema):
        if mode & MODE_CAST and validator.is_type(instance, "array"):
            for index, subschema in enumerate(prefix[: len(instance)]):
                instance[index] = cast_to_schema(instance[index], subschema)
        yield from original(validator, prefix, instance, schema)

    return prefixItems


def _wrap_additional_items(original: Keyword, mode: int) -> Keyword:
    def additionalItems(validator, additional, instance, schema):
        tuple_items = schema.get("items")
        if validator.is_type(instance, "array") and isinstance(tuple_items, list):
            start = len(tuple_items)
            if mode & MODE_CAST and isinstance(additional, dict):
                for index in range(start, len(instance)):
                    instance[index] = cast_to_schema(instance[index], additional)
            if mode & MODE_REMOVE_ADDITIONALS and additional is False:
                del instance[start:]
        yield from original(validator, additional, instance, schema)

    return additionalItems


def _wrap_any_of(original: Keyword, mode: int) -> Keyword:
    def anyOf(validator, branches, instance, schema):
        for branch in branches:
            valid, candidate = _trial(validator, instance, branch)
            if valid:
                _write_back(instance, candidate)
                return
        yield ValidationError(f"{instance!r} is not valid under any of the given schemas")

    return anyOf


def _wrap_one_of(original: Keyword, mode: int) -> Keyword:
    def oneOf(validator, branches, instance, schema):
        trials = [_trial(validator, instance, branch) for branch in branches]
        matches = [candidate for valid, candidate in trials if valid]
        if len(matches) == 1:
            _write_back(instance, matches[0])
        elif not matches:
            yield ValidationError(f"{instance!r} is not valid under any of the given schemas")
        else:
            yield ValidationError(f"{instance!r} is valid under each of {len(matches)} schemas")

    return oneOf


def _wrap_not(original: Keyword, mode: int) -> Keyword:
    def not_(validator, not_schema, instance, schema):
        valid, _ = _trial(validator, instance, not_schema)
        if valid:
            yield ValidationError(f"{instance!r} should not be valid under {not_schema!r}")

    return not_


def _wrap_if(original: Keyword, mode: int) -> Keyword:
    def if_(validator, if_schema, instance, schema):
        matched, candidate = _trial(validator, instance, if_schema)
        if matched:
            _write_back(instance, candidate)
            if "then" in schema:
                yield from validator.descend(instance, schema["then"], schema_path="then")
        elif "else" in schema:
            yield from validator.descend(instance, schema["else"], schema_path="else")

    return if_


_KEYWORD_WRAPPERS: Dict[str, Callable[[Keyword, int], Keyword]] = {
    "properties": _wrap_properties,
    "patternProperties": _wrap_pattern_properties,
    "additionalProperties": _wrap_additional_properties,
    "items": _wrap_items,
    "prefixItems": _wrap_prefix_items,
    "additionalItems": _wrap_additional_items,
    "anyOf": _wrap_any_of,
    "oneOf": _wrap_one_of,
    "not": _wrap_not,
    "if": _wrap_if,
}
