"""
Deterministic Translator Layer

Converts Gravity Forms definitions to form.io schemas and form.io submissions
back to Gravity Forms submission bodies. No I/O happens here.
"""

from .formio_translator import FormioTranslator
from .submission_translator import SubmissionTranslator

__all__ = ['FormioTranslator', 'SubmissionTranslator']
