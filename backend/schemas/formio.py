# schemas/formio.py
from __future__ import annotations
from typing import Optional, Dict, Any
from enum import Enum
from pydantic import BaseModel

from schemas.gravity_form import FieldId

# ---------- Target Vocabulary ----------

class ComponentType(str, Enum):
    TEXTFIELD = "textfield"
    TEXTAREA = "textarea"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    SELECTBOXES = "selectboxes"
    SELECT = "select"
    RADIO = "radio"
    DAY = "day"
    PHONE_NUMBER = "phoneNumber"
    BUTTON = "button"

# Gravity Forms type -> form.io type. Unlisted types pass through unchanged.
COMPONENT_TYPES: Dict[str, str] = {
    "string": ComponentType.TEXTFIELD.value,
    "text": ComponentType.TEXTFIELD.value,
    "int": ComponentType.NUMBER.value,
    "integer": ComponentType.NUMBER.value,
    "float": ComponentType.NUMBER.value,
    "boolean": ComponentType.CHECKBOX.value,
    "consent": ComponentType.CHECKBOX.value,
    "date": ComponentType.DAY.value,
    "phone": ComponentType.PHONE_NUMBER.value,
    "multiselect": ComponentType.SELECT.value,
}

# Gravity Forms size -> form.io size. "medium" has no entry on purpose.
COMPONENT_SIZES: Dict[str, str] = {
    "extra-small": "xs",
    "small": "sm",
    "large": "lg",
    "extra-large": "xl",
}

# NL Design System (utrecht) classes: (base class, required modifier or None)
TEXTBOX_CLASS = ("utrecht-textbox utrecht-textbox--html-input", "utrecht-textbox--required")

CUSTOM_CLASSES: Dict[str, tuple] = {
    ComponentType.TEXTFIELD.value: TEXTBOX_CLASS,
    ComponentType.TEXTAREA.value: ("utrecht-textarea utrecht-textarea--html-textarea", "utrecht-textarea--required"),
    ComponentType.NUMBER.value: ("utrecht-number utrecht-number--html-number", "utrecht-number--required"),
    ComponentType.SELECT.value: ("utrecht-select utrecht-select--html-select", None),
    ComponentType.SELECTBOXES.value: ("utrecht-select utrecht-select--html-select", None),
    ComponentType.CHECKBOX.value: ("utrecht-checkbox utrecht-checkbox--html-input", None),
    ComponentType.RADIO.value: ("utrecht-radio-button utrecht-radio-button--html-input", None),
}

BUTTON_CLASS = "utrecht-button"

# Choice values live in a flat "values" list for these types, in "data.values" otherwise
FLAT_VALUE_TYPES = {ComponentType.RADIO.value, ComponentType.SELECTBOXES.value}

# ---------- Error Records ----------

class ErrorKind(str, Enum):
    CAPABILITY_UNAVAILABLE = "capability_unavailable"
    MISSING_IDENTIFIER = "missing_identifier"
    FORM_NOT_FOUND = "form_not_found"

ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.CAPABILITY_UNAVAILABLE: "Gravity Forms is not installed",
    ErrorKind.MISSING_IDENTIFIER: "No id given",
    ErrorKind.FORM_NOT_FOUND: "Gravity Form with id: {id} is not found",
}

class ErrorRecord(BaseModel):
    message: str
    data: Optional[FieldId] = None

    @classmethod
    def for_kind(cls, kind: ErrorKind, form_id: Optional[FieldId] = None) -> "ErrorRecord":
        message = ERROR_MESSAGES[kind].format(id=form_id)
        if kind == ErrorKind.FORM_NOT_FOUND:
            return cls(message=message, data=form_id)
        return cls(message=message)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
