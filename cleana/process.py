"""
Recursive cleaning of nested records and sequences.

Copy mode never mutates the input: a container is copied lazily at its
first changed child, and containers with no change are returned by
reference (structural sharing). In-place mode deletes and overwrites
directly on the input and hands back the same references.
"""

from itertools import islice
from typing import Any

from .classify import Kind, classify, has_fields, is_plain_record, record_items
from .options import Config, normalize_options
from .predicate import is_excluded, should_remove_primitive
from .sentinels import MISSING
from .tracker import CircularReferenceTracker
from .types import REMOVED, CleanResult, Kept, Removed


def clean(value: Any, options: Any = None, **overrides: Any) -> Any:
    """
    Remove empty values from a nested structure.

    Args:
        value: The data structure to clean
        options: Mapping of option names, CleanOptions, or Config. Accepts
                 snake_case (clean_null) and camelCase (cleanNull) names.
        **overrides: Individual options, applied over `options`

    Options (defaults in parentheses):
        in_place (False): mutate the input instead of copying
        clean_sequence (True): drop lists that end up empty
        clean_record (True): drop records that end up empty
        clean_null (True): drop None
        clean_undefined (True): drop UNDEFINED
        clean_string (True): drop ""
        clean_nan (True): drop float NaN
        remove_keys ([]): record keys to drop at every depth
        remove_values ([]): values to drop at every depth, matched by
                           identity first, then by deep equality
        circular_reference (False): drop references back to an ancestor
                                   instead of recursing forever

    Returns:
        The cleaned value. A root record or list is always returned, even
        when empty; other root values are returned unchanged.

    Raises:
        RecursionError: On input nested deeper than the interpreter's
            recursion limit, or on a cycle with circular_reference off.

    Examples:
        clean({"a": None, "b": "", "c": [], "d": 0})      # {"d": 0}
        clean({"a": [None]})                              # {}
        clean({"a": {"k": 1}, "b": {"k": 2}}, remove_values=[{"k": 1}])
        # {"b": {"k": 2}}
    """
    config = normalize_options(options, **overrides)
    tracker = CircularReferenceTracker() if config.circular_reference else None

    kind = classify(value)
    if kind is Kind.SEQUENCE or kind is Kind.RECORD:
        # The root is never on the path yet, so this always returns a value
        return _walk(value, kind, config, tracker)
    return value


def _walk(
    value: Any, kind: Kind, config: Config, tracker: CircularReferenceTracker | None
) -> Any | Removed:
    """Clean a container's children; REMOVED if it closes a cycle."""
    if tracker is not None and not tracker.enter(value):
        return REMOVED

    if kind is Kind.SEQUENCE:
        if config.in_place:
            cleaned = _compact_sequence(value, config, tracker)
        else:
            cleaned = _clean_sequence(value, config, tracker)
    else:
        if config.in_place:
            cleaned = _prune_record(value, config, tracker)
        else:
            cleaned = _clean_record(value, config, tracker)

    if tracker is not None:
        tracker.leave(value)
    return cleaned


def _clean_child(
    value: Any, config: Config, tracker: CircularReferenceTracker | None
) -> CleanResult:
    """Clean a nested value and decide whether it survives in its parent."""
    if value is MISSING:
        return REMOVED

    # Exclusions apply before any built-in rule, and to containers too
    if config.remove_values and is_excluded(value, config):
        return REMOVED

    kind = classify(value)

    if kind is Kind.SEQUENCE:
        cleaned = _walk(value, kind, config, tracker)
        if cleaned is REMOVED or (config.clean_sequence and len(cleaned) == 0):
            return REMOVED
        return Kept(cleaned)

    if kind is Kind.RECORD:
        cleaned = _walk(value, kind, config, tracker)
        if cleaned is REMOVED or (config.clean_record and not has_fields(cleaned)):
            return REMOVED
        return Kept(cleaned)

    if kind is Kind.PRIMITIVE and should_remove_primitive(value, config):
        return REMOVED

    return Kept(value)


def _clean_sequence(
    seq: list[Any], config: Config, tracker: CircularReferenceTracker | None
) -> list[Any]:
    """Copy-mode list cleaning; returns `seq` itself when nothing changed."""
    result: list[Any] | None = None

    for index, item in enumerate(seq):
        cleaned = _clean_child(item, config, tracker)

        if result is None:
            if isinstance(cleaned, Kept) and cleaned.value is item:
                continue
            # First change: copy the untouched prefix
            result = list(islice(seq, index))

        if isinstance(cleaned, Kept):
            result.append(cleaned.value)

    return seq if result is None else result


def _compact_sequence(
    seq: list[Any], config: Config, tracker: CircularReferenceTracker | None
) -> list[Any]:
    """In-place list cleaning: one forward pass, then truncate the tail."""
    write = 0

    for read in range(len(seq)):
        cleaned = _clean_child(seq[read], config, tracker)
        if not isinstance(cleaned, Kept):
            continue
        seq[write] = cleaned.value
        write += 1

    del seq[write:]
    return seq


def _clean_record(
    record: Any, config: Config, tracker: CircularReferenceTracker | None
) -> dict[Any, Any]:
    """
    Copy-mode record cleaning.

    A plain dict with no dropped or replaced field is returned as is.
    Any other record (dict subclass, dataclass, model, object) always
    comes back as a new plain dict.
    """
    remove_keys = config.remove_keys
    result: dict[Any, Any] | None = None if is_plain_record(record) else {}

    for position, (key, value) in enumerate(record_items(record)):
        if remove_keys and key in remove_keys:
            cleaned = REMOVED
        else:
            cleaned = _clean_child(value, config, tracker)

        if result is None:
            if isinstance(cleaned, Kept) and cleaned.value is value:
                continue
            # First change: copy the untouched prefix
            result = dict(islice(record.items(), position))

        if isinstance(cleaned, Kept):
            result[key] = cleaned.value

    return record if result is None else result


def _prune_record(
    record: Any, config: Config, tracker: CircularReferenceTracker | None
) -> Any:
    """In-place record cleaning: delete dropped fields from `record`."""
    remove_keys = config.remove_keys

    # Snapshot, since fields are deleted while walking
    for key, value in list(record_items(record)):
        if remove_keys and key in remove_keys:
            cleaned = REMOVED
        else:
            cleaned = _clean_child(value, config, tracker)

        # Nested containers are pruned in place, so kept fields need no write
        if isinstance(cleaned, Removed):
            _delete_field(record, key)

    return record


def _delete_field(record: Any, key: Any) -> None:
    if isinstance(record, dict):
        del record[key]
    else:
        delattr(record, key)

