import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parent.parent / "backend"
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from schemas.gravity_form import FormDefinition  # noqa: E402


@pytest.fixture
def contact_form():
    """A small Gravity Forms form covering the common field types."""
    return FormDefinition.model_validate({
        "id": 7,
        "title": "Contact",
        "fields": [
            {"id": 1, "type": "text", "label": "First name", "adminLabel": "first_name",
             "size": "large", "isRequired": True, "visibility": "visible"},
            {"id": 2, "type": "email", "label": "Email", "adminLabel": "email",
             "size": "medium", "isRequired": False, "visibility": "visible"},
            {"id": 3, "type": "radio", "label": "Contact me by", "adminLabel": "",
             "choices": [
                 {"text": "Phone", "value": "phone", "isSelected": False},
                 {"text": "Mail", "value": "mail", "isSelected": True},
             ]},
            {"id": 4, "type": "textarea", "label": "Message", "adminLabel": "message",
             "size": "extra-large", "visibility": "hidden", "isRequired": True},
        ],
        "button": {"text": "Send"},
    })
