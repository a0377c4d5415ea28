# schemas/gravity_form.py
from __future__ import annotations
from typing import List, Optional, Union, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Gravity Forms uses numeric ids, but the REST API and hand-built payloads
# sometimes send them as strings.
FieldId = Union[int, str]

# ---------- Source Models ----------

class Choice(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: str = ""
    value: Any = None
    is_selected: bool = Field(default=False, alias="isSelected")

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("is_selected", mode="before")
    @classmethod
    def _blank_flag(cls, value: Any) -> Any:
        return False if value in (None, "") else value

class FieldDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[FieldId] = None
    type: str
    label: str = ""
    admin_label: Optional[str] = Field(default=None, alias="adminLabel")
    size: Optional[str] = "medium"
    description: Optional[str] = None
    # Anything other than "visible", missing included, means hidden
    visibility: Optional[str] = None
    is_required: bool = Field(default=False, alias="isRequired")
    default_value: Optional[Any] = Field(default=None, alias="defaultValue")

    # Only set for choice-bearing types (checkbox, radio, select, multiselect)
    choices: Optional[List[Choice]] = None
    # Only used by consent fields
    checkbox_label: Optional[str] = Field(default=None, alias="checkboxLabel")

    @field_validator("label", mode="before")
    @classmethod
    def _null_label(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("is_required", mode="before")
    @classmethod
    def _blank_flag(cls, value: Any) -> Any:
        return False if value in (None, "") else value

    @field_validator("choices", mode="before")
    @classmethod
    def _blank_choices(cls, value: Any) -> Any:
        # Gravity Forms sends "" for fields without choices. The choices are
        # still "set", so a checkbox keeps becoming selectboxes, but none are added.
        return [] if value == "" else value

class FormButton(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None

class FormDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[FieldId] = None
    title: Optional[str] = None
    fields: List[FieldDefinition] = Field(default_factory=list)
    button: Optional[FormButton] = None

    @field_validator("fields", mode="before")
    @classmethod
    def _null_fields(cls, value: Any) -> Any:
        return [] if value in (None, "") else value
