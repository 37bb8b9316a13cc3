import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage

import config
from models.constants import SMTP_TIMEOUT_SECONDS, OtpEmail, SmtpSecurity
from utils.logging_utils import get_logger


@dataclass(frozen=True)
class SmtpSettings:
    host: str
    port: int
    security: SmtpSecurity
    username: str
    password: str
    sender: str


def load_smtp_settings() -> SmtpSettings:
    """
    Read the SMTP relay settings from the deployment parameters.

    Must be called inside a function invocation, where the platform has
    injected parameter and secret values into the environment.

    Raises:
        ValueError: If SMTP_SECURITY is not one of ssl, starttls or none
    """
    username = config.SMTP_USERNAME.value
    return SmtpSettings(
        host=config.SMTP_HOST.value,
        port=config.SMTP_PORT.value,
        security=SmtpSecurity(config.SMTP_SECURITY.value.lower()),
        username=username,
        password=config.SMTP_PASSWORD.value,
        sender=config.OTP_SENDER.value or username,
    )


def build_otp_message(recipient: str, otp: str, sender: str) -> EmailMessage:
    """
    Build the OTP email with a fixed subject whose body carries the code verbatim.

    Args:
        recipient: Address the code is sent to
        otp: The one-time code
        sender: The From address

    Returns:
        The message ready for submission
    """
    message = EmailMessage()
    message["Subject"] = OtpEmail.SUBJECT.value
    message["From"] = sender
    message["To"] = recipient
    message.set_content(OtpEmail.BODY_TEMPLATE.format(otp=otp))
    return message


def _connect(settings: SmtpSettings) -> smtplib.SMTP:
    if settings.security == SmtpSecurity.SSL:
        return smtplib.SMTP_SSL(
            settings.host,
            settings.port,
            timeout=SMTP_TIMEOUT_SECONDS,
            context=ssl.create_default_context(),
        )

    smtp = smtplib.SMTP(settings.host, settings.port, timeout=SMTP_TIMEOUT_SECONDS)
    if settings.security == SmtpSecurity.STARTTLS:
        smtp.starttls(context=ssl.create_default_context())
    return smtp


def send_message(message: EmailMessage, settings: SmtpSettings) -> None:
    """
    Submit a message to the SMTP relay over a connection opened for this call.

    Connection, authentication and recipient errors from smtplib propagate
    to the caller unchanged.
    """
    logger = get_logger(__name__)
    logger.info(
        f"Connecting to SMTP relay {settings.host}:{settings.port} ({settings.security})"
    )

    with _connect(settings) as smtp:
        if settings.username:
            smtp.login(settings.username, settings.password)
        smtp.send_message(message)

    logger.info(f"SMTP relay accepted the message for {message['To']}")
