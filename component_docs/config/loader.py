"""Load run settings and documentation folder configuration files."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec
from ruamel.yaml import YAML

from component_docs.errors import RunConfigError

from .models import CardEntry, DocConfig, RunConfig

DEFAULT_CONFIG_FILE = Path("component-docs.yaml")

_PATH_FIELDS = (
    "dest_docs_path",
    "script_path",
    "src_path",
    "templates_dir",
    "assets_dir",
)
_KNOWN_FIELDS = frozenset((*_PATH_FIELDS, "project_name", "max_concurrency"))

_json_decoder = msgspec.json.Decoder()


class _RawCard(msgspec.Struct):
    title: typ.Any = None
    subtitle: typ.Any = None
    contents: typ.Any = None


class _RawDocConfig(msgspec.Struct):
    """Field-by-field view of a ``configuration.json`` object, untyped."""

    id: typ.Any = None
    title: typ.Any = None
    tag_name: typ.Any = msgspec.field(default=None, name="tagName")
    subtitle: typ.Any = None
    category: typ.Any = None
    cards: typ.Any = None


def load_run_config(
    path: Path | None = None,
    overrides: typ.Mapping[str, object | None] | None = None,
) -> RunConfig:
    """Build the immutable run configuration from YAML defaults and overrides.

    Parameters
    ----------
    path : Path, optional
        YAML file providing defaults for any :class:`RunConfig` field. When
        ``None`` the function falls back to ``component-docs.yaml`` in the
        working directory if it exists.
    overrides : Mapping[str, object | None], optional
        Explicit values (typically CLI options). ``None`` entries are treated
        as "not supplied" and leave the YAML value or built-in default intact.

    Returns
    -------
    RunConfig
        Frozen settings shared by every component of the build.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given explicitly but does not exist.
    RunConfigError
        If the YAML top level is not a mapping, names unknown keys, or holds
        an invalid ``max_concurrency``.

    Examples
    --------
    >>> cfg = load_run_config(overrides={"project_name": "Acme UI"})
    >>> cfg.project_name
    'Acme UI'
    """
    values: dict[str, typ.Any] = {}
    values.update(_read_yaml_defaults(path))
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    unknown = sorted(set(values) - _KNOWN_FIELDS)
    if unknown:
        msg = f"Unknown run configuration keys: {', '.join(unknown)}"
        raise RunConfigError(msg)

    for key in _PATH_FIELDS:
        if key in values:
            values[key] = Path(values[key])
    if "project_name" in values:
        values["project_name"] = str(values["project_name"])
    if "max_concurrency" in values:
        values["max_concurrency"] = _parse_concurrency(values["max_concurrency"])
    return RunConfig(**values)


def _read_yaml_defaults(path: Path | None) -> dict[str, typ.Any]:
    """Return the mapping stored in the YAML defaults file, or an empty dict."""
    if path is None:
        if not DEFAULT_CONFIG_FILE.exists():
            return {}
        path = DEFAULT_CONFIG_FILE
    elif not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise RunConfigError(msg)
    return dict(loaded)


def _parse_concurrency(value: object) -> int | None:
    """Return a positive concurrency bound, or ``None`` for unbounded."""
    match value:
        case None:
            return None
        case bool():
            pass
        case int() if value > 0:
            return value
        case str() if value.strip().isdigit() and int(value) > 0:
            return int(value)
    msg = f"max_concurrency must be a positive integer, got {value!r}"
    raise RunConfigError(msg)


def _text(value: object) -> str:
    """Return display text for a JSON value; ``null`` renders as ``""``."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return msgspec.json.encode(value).decode()


def _card_entries(value: object) -> list[CardEntry]:
    if not isinstance(value, list):
        return []
    cards = []
    for item in value:
        if not isinstance(item, dict):
            continue
        raw = msgspec.convert(item, _RawCard)
        cards.append(
            CardEntry(
                title=_text(raw.title),
                subtitle=_text(raw.subtitle),
                contents=_text(raw.contents),
            )
        )
    return cards


def decode_doc_config(payload: bytes | str, *, docs_path: Path) -> DocConfig:
    """Decode a ``configuration.json`` payload and attach its folder path.

    Fields are read structurally. ``null`` or non-string display fields become
    text, a non-list ``cards`` value yields no cards, and an ``id`` that is not
    a string is treated as absent so the scanner drops the configuration. A
    document that is not a JSON object decodes to a configuration without an
    ``id``.

    Parameters
    ----------
    payload : bytes | str
        Raw ``configuration.json`` contents.
    docs_path : Path
        Folder the file was read from; replaces any ``docsPath`` in the file.

    Returns
    -------
    DocConfig
        The decoded configuration.

    Raises
    ------
    msgspec.DecodeError
        If the payload is not valid JSON.
    """
    document = _json_decoder.decode(payload)
    if not isinstance(document, dict):
        return DocConfig(docs_path=str(docs_path))
    raw = msgspec.convert(document, _RawDocConfig)
    return DocConfig(
        id=raw.id if isinstance(raw.id, str) else "",
        title=_text(raw.title),
        tag_name=_text(raw.tag_name),
        subtitle=_text(raw.subtitle),
        category=_text(raw.category),
        cards=_card_entries(raw.cards),
        docs_path=str(docs_path),
    )


__all__ = ["DEFAULT_CONFIG_FILE", "decode_doc_config", "load_run_config"]
