from firebase_functions import https_fn
from models.constants import ErrorMessages
from models.data_models import SendOtpEmailResponse
from models.pydantic_models import SendOtpEmailRequest
from utils.logging_utils import get_logger
from utils.mail_utils import build_otp_message, load_smtp_settings, send_message
from utils.validation_utils import validate_request


def send_otp_email(request: https_fn.CallableRequest) -> SendOtpEmailResponse:
    """
    Emails a one-time code to the address given in the request payload.

    The code is neither generated nor stored here. Relay failures are not
    retried and propagate to the caller.

    Args:
        request: The callable request containing:
                - data: {"email": <recipient address>, "otp": <code to send>}

    Returns:
        A SendOtpEmailResponse with success set once the relay accepted the message

    Raises:
        invalid-argument: If email or otp is missing
    """
    logger = get_logger(__name__)
    logger.info("Starting send_otp_email operation")

    otp_request = validate_request(
        request.data, SendOtpEmailRequest, ErrorMessages.EMAIL_AND_OTP_REQUIRED
    )

    settings = load_smtp_settings()
    message = build_otp_message(otp_request.email, otp_request.otp, settings.sender)
    send_message(message, settings)

    logger.info(f"OTP email sent to {otp_request.email}")
    return SendOtpEmailResponse(success=True)
