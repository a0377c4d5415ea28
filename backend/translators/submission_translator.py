"""
Submission Translator

Converts a form.io submission payload back to a Gravity Forms submission body.
"""

from typing import Dict, Mapping, Any, Set
import logging

from schemas.gravity_form import FormDefinition, FieldId

logger = logging.getLogger(__name__)


class SubmissionTranslator:
    """
    Maps submitted values onto Gravity Forms "input_<id>" keys.

    Payload keys are compared to the raw adminLabel of each field. Fields whose
    form.io key fell back to the label are therefore never matched.
    """

    def translate(self, form: FormDefinition, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Args:
            form: Gravity Forms form the payload was submitted against
            payload: form.io submission data, keyed by component key

        Returns:
            Gravity Forms submission body with "input_<id>" keys and "formId"
        """
        body: Dict[str, Any] = {}
        matched_ids: Set[FieldId] = set()

        for field in form.fields:
            for key, value in payload.items():
                if field.id in matched_ids:
                    break
                if key == field.admin_label:
                    body[f"input_{field.id}"] = value
                    matched_ids.add(field.id)

        logger.info(f"Matched {len(matched_ids)} of {len(form.fields)} fields for form {form.id}")

        body["formId"] = form.id
        return body
