"""
Configuration for the OTP validation service.
Read once at startup and handed to create_app().
"""
import json
import os

from dotenv import load_dotenv

from sheet_otp.errors import ConfigError


class Config:
    """Settings for the HTTP server and the spreadsheet store."""

    REQUIRED = ("spreadsheet_id", "google_credentials")

    def __init__(self, spreadsheet_id=None, google_credentials=None, port=3000,
                 host="0.0.0.0", cors_origins=None, log_level="INFO",
                 email_range="A1", otp_range="A3"):
        self.spreadsheet_id = spreadsheet_id
        self.google_credentials = google_credentials
        self.port = int(port)
        self.host = host
        self.cors_origins = cors_origins or ["*"]
        self.log_level = log_level.upper()
        # Stored email sits in A1 and the OTP in A3 of each user's sheet
        self.email_range = email_range
        self.otp_range = otp_range

    @classmethod
    def from_env(cls):
        # ✅ Load the .env file before reading anything
        load_dotenv()

        raw_creds = os.getenv("GOOGLE_CREDENTIALS")
        creds = None
        if raw_creds:
            try:
                creds = json.loads(raw_creds)
            except ValueError as e:
                raise ConfigError(f"GOOGLE_CREDENTIALS is not valid JSON: {e}") from e

        origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

        return cls(
            spreadsheet_id=os.getenv("SPREADSHEET_ID"),
            google_credentials=creds,
            port=os.getenv("PORT", 3000),
            host=os.getenv("HOST", "0.0.0.0"),
            cors_origins=origins,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            email_range=os.getenv("EMAIL_CELL", "A1"),
            otp_range=os.getenv("OTP_CELL", "A3"),
        )

    def validate(self):
        missing = [name.upper() for name in self.REQUIRED if not getattr(self, name)]
        if missing:
            raise ConfigError(f"Missing required settings: {', '.join(missing)}")
        return self
