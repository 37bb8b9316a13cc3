from firebase_functions import params

# Deployment parameters, resolved from the environment at invocation time
REGION = "us-central1"

SMTP_HOST = params.StringParam(
    "SMTP_HOST",
    default="smtp.gmail.com",
    description="Hostname of the SMTP relay used for OTP emails",
)
SMTP_PORT = params.IntParam(
    "SMTP_PORT",
    default=465,
    description="Port of the SMTP relay",
)
SMTP_SECURITY = params.StringParam(
    "SMTP_SECURITY",
    default="ssl",
    description="Transport security of the relay connection: ssl, starttls or none",
)
SMTP_USERNAME = params.StringParam(
    "SMTP_USERNAME",
    default="",
    description="Account used to authenticate against the SMTP relay",
)
OTP_SENDER = params.StringParam(
    "OTP_SENDER",
    default="",
    description="From address of OTP emails, defaults to SMTP_USERNAME",
)

# Stored in Secret Manager and bound to the functions that need it
SMTP_PASSWORD = params.SecretParam("SMTP_PASSWORD")
