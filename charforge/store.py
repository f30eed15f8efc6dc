from __future__ import annotations

from pathlib import Path
from typing import Any
import json

import yaml
from jsonschema import Draft202012Validator
from pydantic import ValidationError

from charforge.forms import parse_create_character
from charforge.models import Character, CreateCharacterInput, dump_model

SCHEMA_DIR = Path(__file__).resolve().parent / "schema"
CHARACTER_SCHEMA = SCHEMA_DIR / "character.schema.json"


class PrettyError(Exception):
    pass


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def _validate_jsonschema(obj: Any, schema_path: Path) -> None:
    schema = _read_json(schema_path)
    v = Draft202012Validator(schema)
    errors = sorted(v.iter_errors(obj), key=lambda e: list(e.path))
    if errors:
        lines = []
        for e in errors[:5]:
            ptr = "/" + "/".join([str(p) for p in e.path])
            lines.append(f"- {ptr}: {e.message}")
        more = "" if len(errors) <= 5 else f" (+{len(errors)-5} more)"
        raise PrettyError("JSON Schema validation failed:\n" + "\n".join(lines) + more)


# Public API


def save_character(character: Character, path: Path) -> None:
    # Omit None fields so we don't write e.g. {"subclass": null}
    data = dump_model(character)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def load_character(path: Path) -> Character:
    try:
        data = _read_json(path)
    except json.JSONDecodeError as e:
        raise PrettyError(f"{path}: invalid JSON ({e.msg} at line {e.lineno})")
    _validate_jsonschema(data, CHARACTER_SCHEMA)
    try:
        return Character.model_validate(data)
    except ValidationError as e:
        raise PrettyError(e.errors(include_url=False))


def load_request(path: Path) -> CreateCharacterInput:
    """Read a creation request from YAML (``.yaml``/``.yml``) or JSON."""
    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = _read_yaml(path)
        else:
            data = _read_json(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise PrettyError(f"{path}: could not parse request ({e})")
    if not isinstance(data, dict):
        raise PrettyError(f"{path}: request must be a mapping")
    return parse_create_character(data)


__all__ = ["PrettyError", "load_character", "load_request", "save_character"]
