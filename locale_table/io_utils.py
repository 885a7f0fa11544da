from __future__ import annotations

import datetime
import json
import re
import tomllib
from typing import Any, Union

import yaml

from .errors import DecodeError
from .sources import Format

BOOL_TAG = 'tag:yaml.org,2002:bool'


def _scalar_key(key: Any) -> str:
    if isinstance(key, bool):
        return 'true' if key else 'false'
    if isinstance(key, (datetime.date, datetime.time)):
        return key.isoformat()
    return str(key)


class LocaleLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans and text mapping keys.

    `yes`, `no`, `on` and `off` stay strings, so locale codes such as `no`
    and answers such as `yes` survive. Keys become text while the mapping
    is built, so `1` and `true` never collapse into one entry.
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark)
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=True)
            mapping[_scalar_key(key)] = self.construct_object(value_node, deep=deep)
        return mapping


LocaleLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$'),
    list('tTfF'),
)


def to_structured(value: Any) -> Any:
    """Coerce parser output into plain JSON-like data.

    YAML and TOML parsers hand back dates, times and non-string mapping
    keys; those are rendered as text so every format yields the same tree.
    """
    if isinstance(value, dict):
        return {_scalar_key(k): to_structured(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_structured(v) for v in value]
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return value


def decode(content: Union[str, bytes], fmt: Union[Format, str]) -> Any:
    """Decode locale file content according to its format."""
    if not isinstance(fmt, Format):
        fmt = Format.from_extension(fmt)
    if isinstance(content, bytes):
        content = content.decode('utf-8')

    try:
        if fmt is Format.YAML:
            data = yaml.load(content, Loader=LocaleLoader)
            if data is None:
                data = {}
        elif fmt is Format.JSON:
            data = json.loads(content)
        else:
            data = tomllib.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise DecodeError(fmt.label, str(exc)) from exc

    return to_structured(data)


def read_source_content(file_obj) -> str:
    """Read locale file text from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()
