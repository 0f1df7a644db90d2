import logging

from sheet_otp.errors import (
    CredentialMismatch,
    InvalidOtpFormat,
    MissingField,
    OtpValidationError,
    StoreUnavailable,
)
from sheet_otp.utils.sheet_utils import sanitize_sheet_name

OTP_LENGTH = 6


class OtpValidator:
    """Checks a submitted (email, otp) pair against the user's sheet.

    Holds no state between calls; the stored OTP is never consumed.
    """

    def __init__(self, reader, config):
        self.reader = reader
        self.config = config
        self.logger = logging.getLogger(__name__)

    def verify_otp(self, email, otp):
        """Raise an OtpValidationError unless the pair matches the sheet"""
        if not email or not otp:
            raise MissingField()

        # Length only; the charset is not restricted
        if not isinstance(otp, str) or len(otp) != OTP_LENGTH:
            raise InvalidOtpFormat()
        if not isinstance(email, str):
            raise InvalidOtpFormat()

        sheet_name = sanitize_sheet_name(email)

        try:
            email_in_sheet = self.reader.read_cell(
                self.config.spreadsheet_id, sheet_name, self.config.email_range)
            otp_in_sheet = self.reader.read_cell(
                self.config.spreadsheet_id, sheet_name, self.config.otp_range)
        except Exception as e:
            self.logger.error(f"Error accessing Google Sheets for sheet {sheet_name}: {str(e)}",
                              exc_info=True)
            raise StoreUnavailable() from e

        # Compare the raw email, not the sheet name: sanitizing can collide
        if email != email_in_sheet or otp != otp_in_sheet:
            raise CredentialMismatch()

    def validate(self, email, otp):
        """Return (status_code, body) for one submission."""
        try:
            self.verify_otp(email, otp)
        except OtpValidationError as e:
            return e.status_code, e.to_dict()
        return 200, {"success": True}
