#!/usr/bin/env python3
"""
Purpose:
    Implements the FieldSchema model for promptmeta, handling validation,
    normalization, packing/unpacking of kind-specific specs, and flat
    serialization back to the authoring shape plugins write.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_serializer,
    model_validator,
)

from promptmeta.core.logging import get_logger
from promptmeta.core.schema.dependency import FieldDependency
from promptmeta.core.schema.field_specs import (
    Bound,
    FieldSpec,
    MultiSelectSpec,
    SelectSpec,
    spec_keys_for,
)
from promptmeta.core.schema.field_type import FieldType

logger = get_logger(__name__)

CustomValidator = Callable[[Any], Optional[str]]

_CUSTOM_VALIDATOR_KEYS = ("customValidator", "custom_validator")


# --- Model --- #

class FieldSchema(BaseModel):
    """
    One metadata field contributed by a plugin or by the core schema.

    Flat authoring:
      - Common keys: key, type, label, description, placeholder, icon,
        required, default, group, order, dependencies
      - `validation: {min, max, pattern, customValidator}` and `options`
        live at top-level but are packed into a kind-specific `spec`

    Kind-specific (live in `spec`; authored flat):
      - string/textarea/markdown: min, max (characters), pattern
      - number:                   min, max (value bounds)
      - array:                    min, max (item counts)
      - select:                   options; min, max (characters), pattern for string values
      - multiselect:              options, min, max (item counts)
      - boolean/object:           nothing

    Authoring keys that mean nothing for the kind (e.g. `pattern` on a number)
    are dropped with a warning.

    `customValidator` applies to every kind and is kept outside the spec.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    # Common
    key: str = Field(..., description="Metadata key this field reads and writes.")
    type: FieldType = Field(..., description="Field kind.")
    label: str = Field(..., description="Human-readable name, used in error messages.")
    description: Optional[str] = Field(default=None)
    placeholder: Optional[str] = Field(default=None)
    icon: Optional[str] = Field(default=None)
    required: bool = Field(default=False, description="Whether an empty value is an error.")
    default: Any = Field(default=None, description="Initial value; only used when explicitly set.")
    group: Optional[str] = Field(default=None, description="Key of the SchemaGroup to render under.")
    order: Optional[Bound] = Field(default=None, description="Sort key within the group.")
    dependencies: List[FieldDependency] = Field(default_factory=list)

    # Per-kind spec (packed/unpacked automatically)
    spec: FieldSpec = Field(..., description="Kind-specific constraints.")
    custom_validator: Optional[CustomValidator] = Field(
        default=None,
        alias="customValidator",
        exclude=True,
        description="Callable returning an error message or None; runs after all other checks.",
    )

    # --- Pre-parse: pack flat keys into spec --- #
    @model_validator(mode="before")
    @classmethod
    def _pack_flat_spec(cls, data: Any) -> Any:
        """
        Convert `validation`/`options` authoring keys into a typed `spec`
        based on `type`. Unknown types are rejected here, before any spec is built.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if data.get("type") is None:
            return data  # reported as a missing field
        ft = FieldType.parse(data["type"])
        if ft is FieldType.INVALID:
            valid = ", ".join(FieldType.valid_values())
            raise ValueError(f"Unknown field type {data['type']!r}; valid types are: {valid}")

        validation = cls._fs_pop_validation(data)
        cls._fs_lift_custom_validator(data, validation)

        flat = {k: v for k, v in validation.items() if v is not None}
        options = data.pop("options", None)
        if options is not None:
            flat["options"] = options

        has_spec = data.get("spec") is not None
        if flat and has_spec:
            raise ValueError("Provide either 'validation'/'options' or 'spec', not both")

        allowed = spec_keys_for(ft)
        flat = cls._fs_drop_inapplicable_keys(data.get("key"), ft, flat, allowed)

        if not has_spec:
            data["spec"] = {"kind": ft.value, **{allowed[k]: v for k, v in flat.items()}}
        return data

    # --- Validators --- #

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, v: Any) -> FieldType:
        """Coerce incoming values to FieldType (unknowns → INVALID)."""
        return FieldType.parse(v)

    @field_validator("key", mode="before")
    @classmethod
    def _normalize_key(cls, v: Any) -> str:
        s = "" if v is None else str(v).strip()
        if not s:
            raise ValueError("The 'key' of a field must be a non-empty string")
        return s

    @field_validator("dependencies", mode="before")
    @classmethod
    def _none_means_no_dependencies(cls, v: Any) -> Any:
        return [] if v is None else v

    @model_validator(mode="after")
    def _post(self) -> "FieldSchema":
        """Final validation: an explicit spec's kind must match the type."""
        if self.spec.kind != self.type.value:
            raise ValueError(f"'spec.kind' ({self.spec.kind}) does not match type '{self.type.value}'")
        return self

    # --- Convenience --- #

    @property
    def has_default(self) -> bool:
        """True if a default was explicitly supplied (even `None`)."""
        return "default" in self.model_fields_set

    @property
    def sort_order(self) -> Bound:
        """`order` with a missing value treated as 0."""
        return self.order or 0

    @property
    def options(self) -> list:
        """Declared options for select/multiselect fields; empty otherwise."""
        if isinstance(self.spec, (SelectSpec, MultiSelectSpec)) and self.spec.options:
            return list(self.spec.options)
        return []

    # --- Serializer: flatten spec back to top-level --- #
    @model_serializer(mode="plain")
    def _dump_flat(self) -> Dict[str, Any]:
        """
        Emit the flat authoring shape: spec attributes are mapped back to
        `validation` keys and `options`. `customValidator` is never emitted.
        """
        out: Dict[str, Any] = {
            "key": self.key,
            "type": self.type.value,
            "label": self.label,
            "required": self.required,
        }
        for name in ("description", "placeholder", "icon", "group", "order"):
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        if self.has_default:
            out["default"] = self.default
        if self.dependencies:
            out["dependencies"] = [
                {"field": d.field, "value": d.value, "condition": d.condition.value}
                for d in self.dependencies
            ]
        out.update(self._dump_spec())
        return out

    # --- Pack Flat Spec Helpers --- #
    @staticmethod
    def _fs_pop_validation(data: dict) -> Dict[str, Any]:
        raw = data.pop("validation", None)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError("'validation' must be a mapping")
        return dict(raw)

    @staticmethod
    def _fs_lift_custom_validator(data: dict, validation: Dict[str, Any]) -> None:
        """Move `customValidator` from the validation block to the model field."""
        for name in _CUSTOM_VALIDATOR_KEYS:
            fn = validation.pop(name, None)
            if fn is not None:
                if any(data.get(k) is not None for k in _CUSTOM_VALIDATOR_KEYS):
                    raise ValueError("'customValidator' given twice")
                data["custom_validator"] = fn

    @staticmethod
    def _fs_drop_inapplicable_keys(
        key: Any, ft: FieldType, flat: Dict[str, Any], allowed: Dict[str, str]
    ) -> Dict[str, Any]:
        """Keep only the authoring keys meaningful for `ft`; the rest are logged and ignored."""
        ignored = sorted(set(flat) - set(allowed))
        if ignored:
            logger.warning(
                "Ignoring constraint keys that do not apply to this field type",
                field_key=key,
                field_type=ft.value,
                ignored=ignored,
            )
        return {k: v for k, v in flat.items() if k in allowed}

    # --- Dump Flat Helpers --- #
    def _dump_spec(self) -> Dict[str, Any]:
        spec_dict = self.spec.model_dump()
        validation: Dict[str, Any] = {}
        out: Dict[str, Any] = {}
        for authoring_key, attr in spec_keys_for(self.type).items():
            value = spec_dict.get(attr)
            if value is None:
                continue
            if authoring_key == "options":
                out["options"] = value
            else:
                validation[authoring_key] = value
        if validation:
            out["validation"] = validation
        return out


# --- Lookup helpers --- #

def find_field(fields: Sequence[FieldSchema], key: str) -> Optional[FieldSchema]:
    """First field whose key matches, or None (duplicates resolve to the first)."""
    return next((f for f in fields if f.key == key), None)
