"""
Serialization helpers for vprintf scripts (Emission, Script, Value).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Values are stored with their kind so 2.0 stays a float after a round trip.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from vprintf.model import Emission, Script, Variant
from vprintf.values import Value, make_value


def value_to_dict(v: Value) -> Dict[str, Any]:
    if not isinstance(v, Value):
        raise TypeError(f"Unsupported value type: {type(v)}")
    return {"kind": v.kind.name.lower(), "value": v.value}


def value_from_dict(d: Any) -> Value:
    if not isinstance(d, dict) or "kind" not in d:
        raise TypeError(f"Unsupported value dict: {d!r}")
    return make_value(d["kind"], d.get("value"))


def emission_to_dict(e: Emission) -> Dict[str, Any]:
    return {
        "variant": e.variant.value,
        "template": e.template,
        "arguments": [value_to_dict(a) for a in e.arguments],
    }


def emission_from_dict(d: Dict[str, Any]) -> Emission:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported emission dict: {d!r}")
    return Emission(
        variant=Variant(d["variant"]),
        template=d["template"],
        arguments=[value_from_dict(a) for a in d.get("arguments", [])],
    )


def script_to_dict(s: Script) -> Dict[str, Any]:
    return {
        "name": s.name,
        "emissions": [emission_to_dict(e) for e in s.emissions],
        "metadata": s.metadata,
    }


def script_from_dict(d: Dict[str, Any]) -> Script:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported script document: {type(d).__name__}")
    s = Script(name=d.get("name", ""))
    s.emissions = [emission_from_dict(e) for e in d.get("emissions", [])]
    s.metadata = d.get("metadata", {})
    return s


def script_to_json(s: Script) -> str:
    return json.dumps(script_to_dict(s), sort_keys=True)


def script_from_json(s: str) -> Script:
    d = json.loads(s)
    return script_from_dict(d)


def script_to_yaml(s: Script) -> str:
    return yaml.safe_dump(script_to_dict(s))


def script_from_yaml(s: str) -> Script:
    d = yaml.safe_load(s)
    return script_from_dict(d)


def load_script(path: Union[str, Path]) -> Script:
    """
    Load a script file, choosing the format by suffix.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is not .json, .yaml or .yml
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported script format: {path.name}")

    content = path.read_text(encoding="utf-8")
    if suffix == ".json":
        return script_from_json(content)
    return script_from_yaml(content)


def save_script(s: Script, path: Union[str, Path]) -> None:
    """Write a script file in the format its suffix names."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        path.write_text(script_to_json(s), encoding="utf-8")
    else:
        path.write_text(script_to_yaml(s), encoding="utf-8")
