from email_validator import EmailNotValidError, validate_email

from signup_service.presentation.protocols.email_validator import EmailValidator


class EmailValidatorAdapter(EmailValidator):
    """EmailValidator backed by the ``email-validator`` package.

    Only syntax/deliverability rejections map to ``False``; any other
    failure is raised to the caller.
    """

    def __init__(self, check_deliverability: bool = False) -> None:
        self.check_deliverability = check_deliverability

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=self.check_deliverability)
        except EmailNotValidError:
            return False
        return True
