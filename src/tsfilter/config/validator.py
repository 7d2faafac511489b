"""Config file validation for tsfilter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from tsfilter.constants.config import CONFIG_FILENAME, CONFIG_SCHEMA
from tsfilter.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005
from tsfilter.exceptions.validation import ValidationError

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a tsfilter.yaml file and return all validation errors.

    Never raises; every problem is returned as a :class:`ValidationError`.
    A missing default config file is not an error.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            return [
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            ]
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        return [
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"cannot parse config file: {exc}",
            )
        ]

    if raw is None:
        return []
    return validate_config_data(raw, path_str)


def validate_config_data(raw: Any, path: str = CONFIG_FILENAME) -> list[ValidationError]:
    """Validate an already-parsed config mapping against the config schema."""
    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=CFG003,
                path=path,
                field="",
                message=f"config must be a mapping, got {type(raw).__name__}",
            )
        ]

    errors: list[ValidationError] = []
    for schema_error in _VALIDATOR.iter_errors(raw):
        field = ".".join(str(part) for part in schema_error.absolute_path)
        if schema_error.validator == "additionalProperties":
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path,
                    field=field,
                    message=schema_error.message,
                    hint="remove the key or check its spelling",
                )
            )
            continue
        errors.append(
            ValidationError(
                code=CFG005,
                path=path,
                field=field,
                message=schema_error.message,
            )
        )
    return errors
