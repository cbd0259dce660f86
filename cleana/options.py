"""
Option handling for clean().

User-facing options are sparse: every field may be left out, and the
camelCase spelling of the original interface is accepted next to the
snake_case one. normalize_options() compiles them, together with any
defaults from an enclosing cleaning_context(), into one immutable Config
shared by every recursive step of a call.
"""

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from .context import current_layers, is_strict

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Dense, immutable configuration consumed by the cleaner."""

    in_place: bool = False
    clean_sequence: bool = True
    clean_record: bool = True
    clean_null: bool = True
    clean_undefined: bool = True
    clean_string: bool = True
    clean_nan: bool = True
    remove_keys: frozenset[Hashable] = frozenset()
    remove_values: tuple[Any, ...] = ()
    circular_reference: bool = False


DEFAULT_CONFIG = Config()


def _option(*aliases: str) -> Any:
    return Field(default=None, validation_alias=AliasChoices(*aliases))


class CleanOptions(BaseModel):
    """
    Sparse options for clean(). None means "use the default".

    Usage:
        CleanOptions(in_place=True)
        CleanOptions.model_validate({"cleanNull": False, "removeKeys": ["id"]})
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    in_place: bool | None = _option("in_place", "inPlace")
    clean_sequence: bool | None = _option(
        "clean_sequence", "cleanSequence", "clean_array", "cleanArray"
    )
    clean_record: bool | None = _option(
        "clean_record", "cleanRecord", "clean_object", "cleanObject"
    )
    clean_null: bool | None = _option("clean_null", "cleanNull")
    clean_undefined: bool | None = _option("clean_undefined", "cleanUndefined")
    clean_string: bool | None = _option("clean_string", "cleanString")
    clean_nan: bool | None = _option("clean_nan", "cleanNaN")
    remove_keys: list[Any] | None = _option("remove_keys", "removeKeys")
    remove_values: list[Any] | None = _option("remove_values", "removeValues")
    circular_reference: bool | None = _option(
        "circular_reference", "circularReference"
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_error(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        """Malformed fields fall back to their default unless parsing strictly."""
        try:
            return handler(value)
        except ValidationError:
            if info.context and info.context.get("strict"):
                raise
            logger.debug(
                "Ignoring malformed option %s=%r", info.field_name, value
            )
            return None


def parse_options(options: Any, strict: bool = False) -> CleanOptions:
    """
    Parse one layer of user options into CleanOptions.

    Accepts None, CleanOptions, Config, or a mapping of option names.
    Anything else is treated as "no options" (or rejected when strict).
    """
    if options is None:
        return CleanOptions()
    if isinstance(options, CleanOptions):
        return options
    if isinstance(options, Config):
        options = {f.name: getattr(options, f.name) for f in fields(options)}
    elif not isinstance(options, Mapping):
        if strict:
            return CleanOptions.model_validate(options)
        logger.debug("Ignoring options of type %s", type(options).__name__)
        return CleanOptions()
    return CleanOptions.model_validate(dict(options), context={"strict": strict})


def _hashable_keys(keys: list[Any]) -> frozenset[Hashable]:
    kept = set()
    for key in keys:
        try:
            hash(key)
        except TypeError:
            logger.debug("Ignoring unhashable remove_keys entry %r", key)
            continue
        kept.add(key)
    return frozenset(kept)


def _to_config(layers: list[CleanOptions]) -> Config:
    """Overlay parsed layers (later wins) onto the defaults."""
    resolved: dict[str, Any] = {}
    for layer in layers:
        for name, value in layer:
            if value is not None:
                resolved[name] = value

    if "remove_keys" in resolved:
        resolved["remove_keys"] = _hashable_keys(resolved["remove_keys"])
    if "remove_values" in resolved:
        resolved["remove_values"] = tuple(resolved["remove_values"])

    return Config(**resolved)


def normalize_options(options: Any = None, **overrides: Any) -> Config:
    """
    Compile sparse options into a dense Config.

    Args:
        options: None, a CleanOptions, a Config, or a mapping of option
                 names (snake_case or camelCase)
        **overrides: Individual options, applied over `options`

    Returns:
        Config with every field resolved. Precedence, lowest first:
        built-in defaults, enclosing cleaning_context() defaults,
        `options`, `overrides`.

    Raises:
        pydantic.ValidationError: Only inside cleaning_context(strict=True),
            when an option has the wrong type.

    Examples:
        normalize_options()                         # DEFAULT_CONFIG
        normalize_options({"cleanNull": False})     # Config(clean_null=False, ...)
        normalize_options(in_place=True)            # Config(in_place=True, ...)
    """
    context_layers = current_layers()

    if not overrides and not context_layers:
        if options is None or (isinstance(options, Mapping) and not options):
            return DEFAULT_CONFIG
        if isinstance(options, Config):
            return options

    strict = is_strict()
    layers = [parse_options(layer, strict) for layer in context_layers]
    layers.append(parse_options(options, strict))
    if overrides:
        layers.append(parse_options(overrides, strict))

    return _to_config(layers)
