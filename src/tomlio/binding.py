# topmark:header:start
#
#   project      : tomlio
#   file         : binding.py
#   file_relpath : src/tomlio/binding.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Move data between decoded TOML tables and destination objects.

Decoders parse a document into a plain ``dict`` (a `TomlTable`) and then call
`bind` to populate the caller's object. Three destination shapes are supported:

- mutable mappings: keys are merged, nested tables are merged recursively;
- dataclass instances: values are assigned by field name and checked against
  the field type hints (nested dataclasses are populated recursively);
- plain objects: attributes are set by name.

Keys without a matching dataclass field are ignored (logged at DEBUG).

`stage` and `commit` let the I/O helpers decode into a private copy and only
publish the result once every step succeeded, so a failed load leaves the
caller's object untouched.

`to_table` is the inverse used by encoders.
"""

from __future__ import annotations

import copy
import dataclasses
import datetime as dt
import types
import typing
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from enum import Enum
from pathlib import PurePath
from typing import Any, cast, get_args, get_origin

from tomlio.errors import BindingError
from tomlio.logging import TomlioLogger, get_logger

logger: TomlioLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_MISSING: Any = object()


# --- Decoding: table -> destination ---


def bind(destination: Any, table: Mapping[str, Any]) -> None:
    """Populate ``destination`` in place from a decoded TOML table.

    Args:
        destination (Any): Mutable mapping, dataclass instance, or plain object.
        table (Mapping[str, Any]): Decoded TOML content.

    Raises:
        BindingError: If the table does not fit the destination's shape.
    """
    _bind(destination, table, where="")


def _bind(destination: Any, table: Mapping[str, Any], where: str) -> None:
    if isinstance(destination, MutableMapping):
        _bind_mapping(cast("MutableMapping[str, Any]", destination), table, where)
    elif _is_dataclass_instance(destination):
        _bind_dataclass(destination, table, where)
    elif _is_plain_object(destination):
        _bind_object(destination, table, where)
    else:
        raise BindingError(
            f"{where or '<root>'}: cannot decode a table into {type(destination).__name__}"
        )


def _bind_mapping(dst: MutableMapping[str, Any], table: Mapping[str, Any], where: str) -> None:
    for key, value in table.items():
        current: Any = dst.get(key, _MISSING)
        if isinstance(value, Mapping) and _is_bindable(current):
            _bind(current, cast("Mapping[str, Any]", value), _join(where, key))
        else:
            dst[key] = value


def _bind_dataclass(dst: Any, table: Mapping[str, Any], where: str) -> None:
    cls: type[Any] = type(dst)
    hints: dict[str, Any] = _type_hints(cls)
    names: set[str] = {f.name for f in dataclasses.fields(dst)}
    params: Any = getattr(cls, "__dataclass_params__", None)
    if params is not None and params.frozen:
        raise BindingError(f"{where or '<root>'}: cannot decode into frozen {cls.__name__}")

    for key, value in table.items():
        path: str = _join(where, key)
        if key not in names:
            logger.debug("Ignoring unknown key '%s' for %s", path, cls.__name__)
            continue
        hint: Any = hints.get(key, Any)
        current: Any = getattr(dst, key, _MISSING)
        if isinstance(value, Mapping) and _is_bindable(current):
            table_value = cast("Mapping[str, Any]", value)
            if isinstance(current, MutableMapping) and hint is not Any and get_args(hint):
                # Parameterized mapping hints check the values before merging.
                table_value = _convert(hint, table_value, path)
            _bind(current, table_value, path)
            continue
        setattr(dst, key, _convert(hint, value, path))


def _bind_object(dst: Any, table: Mapping[str, Any], where: str) -> None:
    for key, value in table.items():
        current: Any = getattr(dst, key, _MISSING)
        if isinstance(value, Mapping) and _is_bindable(current):
            _bind(current, cast("Mapping[str, Any]", value), _join(where, key))
        else:
            setattr(dst, key, value)


def _convert(hint: Any, value: Any, path: str) -> Any:
    """Check ``value`` against ``hint`` and return the value to assign."""
    if hint is Any or hint is object:
        return value

    origin: Any = get_origin(hint)
    args: tuple[Any, ...] = get_args(hint)

    if origin is typing.Union or origin is types.UnionType:
        for arm in args:
            if arm is type(None):
                continue
            try:
                return _convert(arm, value, path)
            except BindingError:
                continue
        raise _mismatch(hint, value, path)

    if origin is typing.Literal:
        if value in args:
            return value
        raise _mismatch(hint, value, path)

    if origin is not None:
        return _convert_generic(origin, args, value, path, hint)

    if not isinstance(hint, type):
        # Unresolved forward references, TypeVars, NewTypes, ...
        return value

    if dataclasses.is_dataclass(hint):
        if not isinstance(value, Mapping):
            raise _mismatch(hint, value, path)
        return _build_dataclass(hint, cast("Mapping[str, Any]", value), path)
    if hint is bool:
        if isinstance(value, bool):
            return value
        raise _mismatch(hint, value, path)
    if hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise _mismatch(hint, value, path)
    if hint is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        raise _mismatch(hint, value, path)
    if issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError as exc:
            raise _mismatch(hint, value, path) from exc
    if issubclass(hint, PurePath):
        if isinstance(value, str):
            return hint(value)
        raise _mismatch(hint, value, path)
    if isinstance(value, hint):
        return value
    raise _mismatch(hint, value, path)


def _convert_generic(
    origin: Any, args: tuple[Any, ...], value: Any, path: str, hint: Any
) -> Any:
    if origin in (list, Sequence, MutableSequence):
        if not isinstance(value, list):
            raise _mismatch(hint, value, path)
        item_hint: Any = args[0] if args else Any
        return [_convert(item_hint, v, f"{path}[{i}]") for i, v in enumerate(value)]

    if origin is tuple:
        if not isinstance(value, list):
            raise _mismatch(hint, value, path)
        if not args or (len(args) == 2 and args[1] is Ellipsis):
            item_hint = args[0] if args else Any
            return tuple(_convert(item_hint, v, f"{path}[{i}]") for i, v in enumerate(value))
        if len(args) != len(value):
            raise _mismatch(hint, value, path)
        return tuple(_convert(a, v, f"{path}[{i}]") for i, (a, v) in enumerate(zip(args, value)))

    if origin in (set, frozenset):
        if not isinstance(value, list):
            raise _mismatch(hint, value, path)
        item_hint = args[0] if args else Any
        return origin(_convert(item_hint, v, f"{path}[{i}]") for i, v in enumerate(value))

    if origin in (dict, Mapping, MutableMapping):
        if not isinstance(value, Mapping):
            raise _mismatch(hint, value, path)
        value_hint: Any = args[1] if len(args) == 2 else Any
        table = cast("Mapping[str, Any]", value)
        return {k: _convert(value_hint, v, _join(path, k)) for k, v in table.items()}

    return value


def _build_dataclass(cls: type[Any], table: Mapping[str, Any], path: str) -> Any:
    hints: dict[str, Any] = _type_hints(cls)
    init_names: set[str] = {f.name for f in dataclasses.fields(cls) if f.init}
    kwargs: dict[str, Any] = {}
    for key, value in table.items():
        if key not in init_names:
            logger.debug("Ignoring unknown key '%s' for %s", _join(path, key), cls.__name__)
            continue
        kwargs[key] = _convert(hints.get(key, Any), value, _join(path, key))
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise BindingError(f"{path}: cannot build {cls.__name__}: {exc}") from exc


def _type_hints(cls: type[Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError) as exc:
        # Annotations that cannot be resolved are accepted as-is.
        logger.debug("Cannot resolve type hints of %s: %s", cls.__name__, exc)
        return {f.name: f.type for f in dataclasses.fields(cls) if not isinstance(f.type, str)}


def _mismatch(hint: Any, value: Any, path: str) -> BindingError:
    expected: str = getattr(hint, "__name__", None) or repr(hint)
    return BindingError(f"{path}: expected {expected}, got {type(value).__name__} ({value!r})")


def _join(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _is_plain_object(value: Any) -> bool:
    return hasattr(value, "__dict__") and not isinstance(value, (type, types.ModuleType))


def _is_bindable(value: Any) -> bool:
    if value is _MISSING:
        return False
    return isinstance(value, MutableMapping) or _is_dataclass_instance(value)


# --- Staging ---


def stage(destination: Any) -> Any:
    """Return a private deep copy of ``destination`` to decode into.

    Raises:
        BindingError: If the destination cannot be copied.
    """
    try:
        return copy.deepcopy(destination)
    except (TypeError, copy.Error) as exc:
        raise BindingError(f"cannot stage {type(destination).__name__}: {exc}") from exc


def commit(destination: Any, staged: Any) -> None:
    """Publish the state of ``staged`` into ``destination`` in one step.

    Nested mappings and dataclasses are updated in place, so references the
    caller holds to them (e.g. ``server = settings.server``) see the new values.

    Args:
        destination (Any): The caller's object.
        staged (Any): A copy produced by `stage` and populated by a decoder.
    """
    if isinstance(destination, MutableMapping):
        dst = cast("MutableMapping[str, Any]", destination)
        src = cast("Mapping[str, Any]", staged)
        for key in [k for k in dst if k not in src]:
            del dst[key]
        for key, value in src.items():
            if not _commit_nested(dst.get(key, _MISSING), value):
                dst[key] = value
        return

    if hasattr(staged, "__dict__"):
        names: list[str] = list(vars(staged))
    elif _is_dataclass_instance(staged):
        # slots dataclasses
        names = [f.name for f in dataclasses.fields(staged)]
    else:
        raise BindingError(f"cannot commit into {type(destination).__name__}")
    for name in names:
        value: Any = getattr(staged, name)
        if not _commit_nested(getattr(destination, name, _MISSING), value):
            setattr(destination, name, value)


def _commit_nested(current: Any, value: Any) -> bool:
    if not _is_bindable(current) or type(current) is not type(value):
        return False
    commit(current, value)
    return True


# --- Encoding: value -> table ---


def to_table(value: Any) -> TomlTable:
    """Convert ``value`` to a TOML-compatible table.

    TOML has no ``null``: keys with ``None`` values and ``None`` list items are
    dropped. Paths become strings, enums become their values.

    Args:
        value (Any): Mapping, dataclass instance, or plain object.

    Returns:
        TomlTable: A plain ``dict`` suitable for the TOML renderer.

    Raises:
        BindingError: If ``value`` does not convert to a table.
    """
    data: Any = _to_plain(value)
    if not isinstance(data, dict):
        raise BindingError(f"cannot encode {type(value).__name__} as a TOML table")
    return cast("TomlTable", data)


def _to_plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        for k_any, v_any in cast("Mapping[object, Any]", value).items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            out[k_any if isinstance(k_any, str) else str(k_any)] = _to_plain(v_any)
        return out
    if _is_dataclass_instance(value):
        return _to_plain({f.name: getattr(value, f.name) for f in dataclasses.fields(value)})
    if isinstance(value, Enum):
        return _to_plain(value.value)
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, (str, int, float, dt.date, dt.time)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        items: list[Any] = []
        for v_any in cast("list[Any]", list(value)):
            if v_any is None:
                logger.debug("Ignoring `None` entry in list")
                continue
            items.append(_to_plain(v_any))
        return items
    if _is_plain_object(value):
        public = {k: v for k, v in vars(value).items() if not k.startswith("_")}
        return _to_plain(public)
    return value
