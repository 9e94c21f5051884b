"""Lightweight configuration validation utilities."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any, List, Literal, Mapping, get_args, get_origin, get_type_hints

from .schema import CoreConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


class ConfigValidator:
    """Validate a configuration mapping against the TypedDict schema."""

    _ROOT_SCHEMA = CoreConfig

    # Lower bounds for numeric settings, keyed by dotted path
    _MINIMUMS = {
        "translation.max_retries": 1,
        "translation.base_delay": 0,
        "translation.max_delay": 0,
    }

    @classmethod
    def validate(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        """Validate a configuration dictionary and return a list of errors."""
        if not isinstance(config, MappingABC):
            return [
                ValidationError(
                    path="<root>",
                    message="Expected a mapping for the configuration root",
                )
            ]
        return cls._validate_typed_dict(config, cls._ROOT_SCHEMA, path="")

    @classmethod
    def validate_or_raise(cls, config: Mapping[str, Any]) -> None:
        """Validate the configuration and raise ValueError on failure."""
        errors = cls.validate(config)
        if errors:
            details = "\n".join(f"- {err.path}: {err.message}" for err in errors)
            raise ValueError(f"Configuration validation failed:\n{details}")

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _validate_typed_dict(
        cls,
        value: Mapping[str, Any],
        schema: type,
        path: str,
    ) -> List[ValidationError]:
        errors: List[ValidationError] = []
        annotations = get_type_hints(schema)
        required_keys = getattr(schema, "__required_keys__", frozenset())

        for key in sorted(required_keys):
            if key not in value:
                errors.append(
                    ValidationError(
                        path=cls._join(path, key),
                        message="Required key is missing",
                    )
                )

        for key in sorted(value.keys()):
            annotation = annotations.get(key)
            if annotation is None:
                errors.append(
                    ValidationError(
                        path=cls._join(path, key),
                        message=f"Unexpected key for {schema.__name__}",
                    )
                )
                continue
            errors.extend(
                cls._validate_annotation(value[key], annotation, cls._join(path, key))
            )

        return errors

    @classmethod
    def _validate_annotation(cls, value: Any, annotation: Any, path: str) -> List[ValidationError]:
        if cls._is_typed_dict(annotation):
            if not isinstance(value, MappingABC):
                return [
                    ValidationError(
                        path=path,
                        message=f"Expected mapping compatible with {annotation.__name__}",
                    )
                ]
            return cls._validate_typed_dict(value, annotation, path)

        if get_origin(annotation) is Literal:
            allowed = get_args(annotation)
            if value not in allowed:
                return [
                    ValidationError(
                        path=path,
                        message=f"Expected one of {list(allowed)}, got {value!r}",
                    )
                ]
            return []

        if not cls._matches_type(value, annotation):
            return [
                ValidationError(
                    path=path,
                    message=f"Expected {annotation.__name__}, got {type(value).__name__}",
                )
            ]

        minimum = cls._MINIMUMS.get(path)
        if minimum is not None and value < minimum:
            return [
                ValidationError(
                    path=path,
                    message=f"Expected a value >= {minimum}, got {value!r}",
                )
            ]
        return []

    @staticmethod
    def _matches_type(value: Any, annotation: Any) -> bool:
        # bool is an int subclass but never a valid number here
        if isinstance(value, bool):
            return annotation is bool
        if annotation is float:
            return isinstance(value, (int, float))
        return isinstance(value, annotation)

    @staticmethod
    def _is_typed_dict(annotation: Any) -> bool:
        return isinstance(annotation, type) and hasattr(annotation, "__required_keys__")

    @staticmethod
    def _join(path: str, key: str) -> str:
        return f"{path}.{key}" if path else key
