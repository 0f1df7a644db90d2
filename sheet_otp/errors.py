"""Errors raised while validating an OTP submission."""


class ConfigError(Exception):
    """Startup configuration is missing or malformed."""


class OtpValidationError(Exception):
    """Base class for every validation outcome that is not a success."""
    status_code = 400
    message = "Bad request."

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {"success": False, "error": self.message}


class MissingField(OtpValidationError):
    """400 - email or otp absent"""
    status_code = 400
    message = "Email and OTP are required."


class InvalidOtpFormat(OtpValidationError):
    """400 - otp is not exactly six characters"""
    status_code = 400
    message = "Please enter the correct OTP."


class CredentialMismatch(OtpValidationError):
    """401 - stored email or otp differs from the submitted one"""
    status_code = 401
    # Same wording as InvalidOtpFormat; callers must not learn which field failed.
    message = "Please enter the correct OTP."


class StoreUnavailable(OtpValidationError):
    """500 - the spreadsheet read failed"""
    status_code = 500
    message = "Internal server error."
