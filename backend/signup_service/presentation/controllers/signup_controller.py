from signup_service.core.utils.logger import get_logger
from signup_service.domain.entities.account_entity import AccountData
from signup_service.domain.usecases.add_account import AddAccount
from signup_service.presentation.helpers.http_helper import bad_request, ok, server_error
from signup_service.presentation.protocols.controller import Controller
from signup_service.presentation.protocols.http import HttpRequest, HttpResponse
from signup_service.presentation.validation.validation import Validation


logger = get_logger("signup_controller")


class SignUpController(Controller):
    """Registers an account from a signup request.

    Validation errors come back as 400 with the first failing rule's error.
    Anything raised along the way (email validator, hashing, persistence)
    is logged and answered with a bare 500.
    """

    def __init__(self, validation: Validation, add_account: AddAccount) -> None:
        self._validation = validation
        self._add_account = add_account

    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        try:
            error = self._validation.validate(http_request.body)
            if error is not None:
                return bad_request(error)

            body = http_request.body
            account = await self._add_account.add(
                AccountData(name=body["name"], email=body["email"], password=body["password"])
            )
            return ok(account)
        except Exception:
            logger.exception("Signup request failed")
            return server_error()
