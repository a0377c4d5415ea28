"""
Tests for the endpoint that checks the request, fetches the form and
runs the translators.

Run: pytest tests/test_formio_endpoint.py -v
"""

import json
from typing import Any, Dict, Optional

import pytest

from schemas.gravity_form import FormDefinition
from services.form_source import FormSource
from services.formio_endpoint import FormioEndpoint


class FakeFormSource(FormSource):
    """In-memory FormSource that records submissions"""

    def __init__(self, forms=None, available=True):
        self.forms = forms or {}
        self.available = available
        self.submissions = []
        self.lookups = []

    def is_available(self) -> bool:
        return self.available

    def get_form(self, form_id) -> Optional[FormDefinition]:
        self.lookups.append(form_id)
        return self.forms.get(form_id)

    def submit_form(self, form_id, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.submissions.append((form_id, payload))
        return {"is_valid": True, "entry_id": 42, "confirmation_message": "Thanks"}


@pytest.fixture
def source(contact_form):
    return FakeFormSource(forms={7: contact_form})


@pytest.fixture
def endpoint(source):
    return FormioEndpoint(source)


class TestGfToFormio:

    def test_returns_formio_form(self, endpoint):
        result = endpoint.gf_to_formio({"id": 7})
        assert result["display"] == "form"
        assert len(result["components"]) == 5

    def test_missing_id(self, endpoint, source):
        assert endpoint.gf_to_formio({}) == {"message": "No id given"}
        assert source.lookups == []

    def test_none_id_counts_as_missing(self, endpoint):
        assert endpoint.gf_to_formio({"id": None}) == {"message": "No id given"}

    def test_not_found(self, endpoint):
        assert endpoint.gf_to_formio({"id": 999}) == {
            "message": "Gravity Form with id: 999 is not found",
            "data": 999,
        }

    def test_unavailable_is_checked_first(self, contact_form):
        source = FakeFormSource(forms={7: contact_form}, available=False)
        result = FormioEndpoint(source).gf_to_formio({})
        assert result == {"message": "Gravity Forms is not installed"}
        assert source.lookups == []


class TestFormioPost:

    def test_submits_translated_body(self, endpoint, source):
        body = json.dumps({"first_name": "Ann", "email": "a@x.com"}).encode()
        result = endpoint.formio_post({"id": 7, "body": body})

        assert result == {"is_valid": True, "entry_id": 42, "confirmation_message": "Thanks"}
        assert source.submissions == [
            (7, {"input_1": "Ann", "input_2": "a@x.com", "formId": 7})
        ]

    def test_accepts_mapping_body(self, endpoint, source):
        endpoint.formio_post({"id": 7, "body": {"message": "Hi"}})
        assert source.submissions == [(7, {"input_4": "Hi", "formId": 7})]

    def test_accepts_string_body(self, endpoint, source):
        endpoint.formio_post({"id": 7, "body": '{"email": "a@x.com"}'})
        assert source.submissions == [(7, {"input_2": "a@x.com", "formId": 7})]

    @pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", None])
    def test_unusable_body_submits_only_form_id(self, endpoint, source, body):
        endpoint.formio_post({"id": 7, "body": body})
        assert source.submissions == [(7, {"formId": 7})]

    def test_form_without_id_uses_requested_id(self):
        form = FormDefinition.model_validate({
            "fields": [{"id": 1, "type": "text", "label": "A", "adminLabel": "a"}],
        })
        source = FakeFormSource(forms={"12": form})
        FormioEndpoint(source).formio_post({"id": "12", "body": {"a": "x"}})
        assert source.submissions == [("12", {"input_1": "x", "formId": "12"})]

    def test_missing_id(self, endpoint, source):
        assert endpoint.formio_post({"body": b"{}"}) == {"message": "No id given"}
        assert source.submissions == []

    def test_not_found(self, endpoint, source):
        result = endpoint.formio_post({"id": 5, "body": b"{}"})
        assert result == {"message": "Gravity Form with id: 5 is not found", "data": 5}
        assert source.submissions == []

    def test_unavailable(self, contact_form):
        source = FakeFormSource(forms={7: contact_form}, available=False)
        result = FormioEndpoint(source).formio_post({"id": 7, "body": b"{}"})
        assert result == {"message": "Gravity Forms is not installed"}
        assert source.submissions == []
