from enum import StrEnum


# Custom claim names written to Firebase Auth user records
class ClaimFields(StrEnum):
    USER_TYPE = "usertype"


# Values for the usertype custom claim
class UserTypes(StrEnum):
    ADMIN = "admin"


# Fixed parts of the OTP email
class OtpEmail(StrEnum):
    SUBJECT = "Your OTP Code"
    BODY_TEMPLATE = "Your OTP code is: {otp}"


# Seconds before an SMTP connection attempt gives up
SMTP_TIMEOUT_SECONDS = 30


# Error messages returned to callers
class ErrorMessages(StrEnum):
    UID_REQUIRED = "User ID is required"
    EMAIL_AND_OTP_REQUIRED = "Email and OTP are required"
    UNAUTHENTICATED = "Authentication is required"
    ADMIN_REQUIRED = "Only administrators can grant the admin role"


# Transport security of the SMTP relay connection
class SmtpSecurity(StrEnum):
    SSL = "ssl"
    STARTTLS = "starttls"
    NONE = "none"
