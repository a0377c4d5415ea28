from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from schemas.gravity_form import FormDefinition, FieldId


class FormSource(ABC):
    """Capability that stores Gravity Forms forms and processes their submissions."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the backing Gravity Forms installation can be reached"""

    @abstractmethod
    def get_form(self, form_id: FieldId) -> Optional[FormDefinition]:
        """Fetch a form, or None when no form has this id"""

    @abstractmethod
    def submit_form(self, form_id: FieldId, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Hand a submission body to Gravity Forms and return its result unchanged"""
