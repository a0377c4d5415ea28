"""
form.io Translator

Converts a Gravity Forms form definition to a form.io form schema.
Every field runs through the same ordered pipeline of pure steps; each step
takes the partial component and returns a new one.
"""

from typing import Callable, Dict, List, Any, Optional
import logging

from schemas.gravity_form import FormDefinition, FieldDefinition, FormButton, Choice
from schemas.formio import (
    ComponentType, COMPONENT_TYPES, COMPONENT_SIZES, CUSTOM_CLASSES, TEXTBOX_CLASS,
    BUTTON_CLASS, FLAT_VALUE_TYPES
)

logger = logging.getLogger(__name__)

Component = Dict[str, Any]
Step = Callable[[Component, FieldDefinition], Component]


def resolve_type(field_type: str) -> str:
    """Map a Gravity Forms field type to a form.io component type."""
    return COMPONENT_TYPES.get(field_type, field_type)


def resolve_size(size: Optional[str]) -> Optional[str]:
    """Map a Gravity Forms field size to a form.io size, or None when unmapped."""
    return COMPONENT_SIZES.get(size) if size else None


def resolve_key(field: FieldDefinition) -> str:
    return field.admin_label if field.admin_label else field.label


def get_custom_class(component_type: str, required: bool) -> str:
    """NL Design class for a resolved component type"""
    base, required_modifier = CUSTOM_CLASSES.get(component_type, TEXTBOX_CLASS)
    if required and required_modifier:
        return f"{base} {required_modifier}"
    return base


class FormioTranslator:
    """
    Deterministic translator from Gravity Forms to form.io.
    Field order is kept; the submit button, if any, is always last.
    """

    def __init__(self):
        # Order matters: later steps read the type set by earlier ones
        self.steps: List[Step] = [
            self._set_custom_class,
            self._set_consent_label,
            self._set_multiple,
            self._promote_checkbox_choices,
            self._set_choices,
        ]

    def translate(self, form: FormDefinition) -> Dict[str, Any]:
        """
        Convert a Gravity Forms form to a form.io form.

        Args:
            form: Gravity Forms form definition

        Returns:
            Dict with "display" and "components" in form.io format
        """
        components = [self.convert_field(field) for field in form.fields]

        if form.button is not None:
            components.append(self._create_submit_button(form.button))

        logger.info(f"Translated form {form.id} to {len(components)} form.io components")

        return {
            "display": "form",
            "components": components
        }

    def convert_field(self, field: FieldDefinition) -> Component:
        """Convert a single Gravity Forms field to a form.io component"""
        component = self._create_base_component(field)
        for step in self.steps:
            component = step(component, field)
        return component

    def _create_base_component(self, field: FieldDefinition) -> Component:
        component = {
            "input": True,
            "label": field.label,
            "type": resolve_type(field.type),
            "key": resolve_key(field),
            "id": field.id,
        }

        size = resolve_size(field.size)
        if size is not None:
            component["size"] = size

        component.update({
            "description": field.description,
            "hidden": field.visibility != "visible",
            "validation": {
                "required": field.is_required
            },
            "widget": {
                "type": "input"
            },
            "defaultValue": field.default_value
        })
        return component

    def _set_custom_class(self, component: Component, field: FieldDefinition) -> Component:
        return {**component, "customClass": get_custom_class(component["type"], field.is_required)}

    def _set_consent_label(self, component: Component, field: FieldDefinition) -> Component:
        if field.type != "consent":
            return component
        return {**component, "label": field.checkbox_label}

    def _set_multiple(self, component: Component, field: FieldDefinition) -> Component:
        if field.type != "multiselect":
            return component
        return {**component, "multiple": True}

    def _promote_checkbox_choices(self, component: Component, field: FieldDefinition) -> Component:
        # A checkbox field with choices is a group of checkboxes in form.io
        if field.type != "checkbox" or field.choices is None:
            return component
        return {**component, "type": ComponentType.SELECTBOXES.value}

    def _set_choices(self, component: Component, field: FieldDefinition) -> Component:
        if not field.choices:
            return component
        component = {**component, "widget": {"type": "choicesjs"}}
        return self._distribute_choices(component, field.choices)

    def _distribute_choices(self, component: Component, choices: List[Choice]) -> Component:
        """Add choices to the component and pick the default from the selected one"""
        new_component = {**component, "dataSrc": "values"}
        flat = component["type"] in FLAT_VALUE_TYPES

        values = list(component.get("values", [])) if flat \
            else list(component.get("data", {}).get("values", []))

        for choice in choices:
            values.append({
                "label": choice.text,
                "value": choice.value
            })
            # Last selected choice wins
            if choice.is_selected:
                new_component["defaultValue"] = choice.value

        if flat:
            new_component["values"] = values
        else:
            new_component["data"] = {**component.get("data", {}), "values": values}

        return new_component

    def _create_submit_button(self, button: FormButton) -> Component:
        """Standard form.io submit button"""
        return {
            "type": ComponentType.BUTTON.value,
            "theme": "primary",
            "disableOnInvalid": True,
            "action": "submit",
            "rightIcon": "",
            "leftIcon": "",
            "size": "md",
            "key": "submit",
            "tableView": False,
            "label": button.text or "Submit",
            "input": True,
            "customClass": BUTTON_CLASS
        }
