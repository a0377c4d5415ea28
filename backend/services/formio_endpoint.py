"""
form.io Endpoint

Runs the boundary checks (capability, id, form lookup) and hands the fetched
form to the translators. Failures come back as error records, never raised.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from schemas.formio import ErrorKind, ErrorRecord
from schemas.gravity_form import FormDefinition
from services.form_source import FormSource
from translators import FormioTranslator, SubmissionTranslator

logger = logging.getLogger(__name__)

RawBody = Union[bytes, str, Mapping[str, Any], None]


class FormioEndpoint:
    def __init__(self, source: FormSource):
        self.source = source
        self.formio_translator = FormioTranslator()
        self.submission_translator = SubmissionTranslator()

    def gf_to_formio(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        """Fetch a Gravity Forms form and return it as a form.io form"""
        form, error = self._load_form(request)
        if error:
            return error
        return self.formio_translator.translate(form)

    def formio_post(self, request: Mapping[str, Any]) -> Dict[str, Any]:
        """Translate a form.io submission and let Gravity Forms process it"""
        form, error = self._load_form(request)
        if error:
            return error

        form_id = request["id"]
        # The submission is keyed by the requested id, like the lookup was
        if form.id is None:
            form = form.model_copy(update={"id": form_id})

        payload = self._parse_body(request.get("body"))
        body = self.submission_translator.translate(form, payload)

        logger.info(f"Submitting {len(body) - 1} values to Gravity Form {form_id}")
        return self.source.submit_form(form_id, body)

    def _load_form(self, request: Mapping[str, Any]) -> Tuple[Optional[FormDefinition], Optional[Dict[str, Any]]]:
        if not self.source.is_available():
            logger.warning("Gravity Forms is not available")
            return None, ErrorRecord.for_kind(ErrorKind.CAPABILITY_UNAVAILABLE).to_dict()

        form_id = request.get("id")
        if form_id is None:
            return None, ErrorRecord.for_kind(ErrorKind.MISSING_IDENTIFIER).to_dict()

        form = self.source.get_form(form_id)
        if form is None:
            return None, ErrorRecord.for_kind(ErrorKind.FORM_NOT_FOUND, form_id).to_dict()

        return form, None

    def _parse_body(self, raw: RawBody) -> Mapping[str, Any]:
        """Decode the posted body; anything that is not a JSON object counts as empty"""
        if raw is None:
            return {}
        if isinstance(raw, Mapping):
            return raw

        try:
            decoded = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring submission body that is not valid JSON: {e}")
            return {}

        if not isinstance(decoded, dict):
            logger.warning(f"Ignoring submission body of type {type(decoded).__name__}")
            return {}
        return decoded
