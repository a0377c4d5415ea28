import os
import logging
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv
from pydantic import ValidationError

from schemas.gravity_form import FormDefinition, FieldId
from services.form_source import FormSource

logger = logging.getLogger(__name__)

API_PATH = "/wp-json/gf/v2"
DEFAULT_TIMEOUT = 10.0


class GravityFormsError(Exception):
    """Raised when the Gravity Forms REST API cannot be used"""
    pass


class GravityFormsClient(FormSource):
    """
    FormSource backed by the Gravity Forms REST API (v2).

    Reads GRAVITY_FORMS_URL, GRAVITY_FORMS_CONSUMER_KEY,
    GRAVITY_FORMS_CONSUMER_SECRET and GRAVITY_FORMS_TIMEOUT from the
    environment unless they are passed in.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        consumer_key: Optional[str] = None,
        consumer_secret: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        load_dotenv()
        self.base_url = (base_url or os.getenv("GRAVITY_FORMS_URL") or "").rstrip("/")
        self.consumer_key = consumer_key or os.getenv("GRAVITY_FORMS_CONSUMER_KEY")
        self.consumer_secret = consumer_secret or os.getenv("GRAVITY_FORMS_CONSUMER_SECRET")
        if timeout is None:
            timeout = float(os.getenv("GRAVITY_FORMS_TIMEOUT", DEFAULT_TIMEOUT))
        self.timeout = timeout

        self.session = session or requests.Session()
        if self.consumer_key and self.consumer_secret:
            self.session.auth = (self.consumer_key, self.consumer_secret)

    def is_available(self) -> bool:
        return bool(self.base_url)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{API_PATH}{path}"

    def get_form(self, form_id: FieldId) -> Optional[FormDefinition]:
        url = self._url(f"/forms/{form_id}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise GravityFormsError(f"Error fetching form {form_id}: {str(e)}")

        if response.status_code == 404:
            logger.info(f"Gravity Forms has no form with id {form_id}")
            return None

        try:
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise GravityFormsError(f"Error fetching form {form_id}: {str(e)}")

        # An unknown id can also come back as an empty body
        if not data:
            return None

        try:
            form = FormDefinition.model_validate(data)
        except ValidationError as e:
            raise GravityFormsError(f"Form {form_id} has an unexpected shape: {str(e)}")

        logger.info(f"Fetched form {form_id} with {len(form.fields)} fields")
        return form

    def submit_form(self, form_id: FieldId, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = self._url(f"/forms/{form_id}/submissions")
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            result = response.json()
        except (requests.RequestException, ValueError) as e:
            raise GravityFormsError(f"Error submitting form {form_id}: {str(e)}")

        # Validation failures come back as 400 with a normal submission result
        if response.status_code == 400 and isinstance(result, dict) and "is_valid" in result:
            logger.info(f"Submission for form {form_id} failed validation")
            return result

        if not response.ok:
            raise GravityFormsError(
                f"Error submitting form {form_id}: HTTP {response.status_code}"
            )

        return result
