from typing import List

from signup_service.presentation.protocols.email_validator import EmailValidator
from signup_service.presentation.validation.compare_fields_validation import CompareFieldsValidation
from signup_service.presentation.validation.email_validation import EmailValidation
from signup_service.presentation.validation.required_field_validation import RequiredFieldValidation
from signup_service.presentation.validation.string_field_validation import StringFieldValidation
from signup_service.presentation.validation.validation import Validation
from signup_service.presentation.validation.validation_composite import ValidationComposite


REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


def make_signup_validation(email_validator: EmailValidator) -> ValidationComposite:
    """Signup rules in reporting order.

    Presence of every field first, then their types, then password
    confirmation, then the email format.
    """
    validations: List[Validation] = [RequiredFieldValidation(name) for name in REQUIRED_FIELDS]
    validations.extend(StringFieldValidation(name) for name in REQUIRED_FIELDS)
    validations.append(CompareFieldsValidation("password", "passwordConfirmation"))
    validations.append(EmailValidation("email", email_validator))
    return ValidationComposite(validations)
