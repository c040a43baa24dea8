"""
Validators for storefront form fields.
"""

import re

from django.core.exceptions import ValidationError

# Optional leading "+", then 7 to 15 digits (E.164 upper bound) that may be
# grouped with single spaces or dashes
MOBILE_PHONE_RE = re.compile(r'^\+?\d(?:[ -]?\d){6,14}$')


def validate_mobile_phone(value):
    """Rejects anything that does not look like a mobile number."""
    if not MOBILE_PHONE_RE.match(value or ''):
        raise ValidationError('Invalid phone number', code='invalid_phone')
