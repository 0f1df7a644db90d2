import logging

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from sheet_otp.utils.sheet_utils import cell_address

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

logger = logging.getLogger(__name__)


class SheetsCellReader:
    """Reads single cells from a Google Sheets spreadsheet.

    Anything that exposes ``read_cell(store_id, sheet, cell_range)`` and
    returns a string or None can stand in for this class.
    """

    def __init__(self, service):
        self.service = service

    def read_cell(self, store_id, sheet, cell_range):
        """Return the value of one cell, or None when the cell is empty"""
        result = self.service.spreadsheets().values().get(
            spreadsheetId=store_id,
            range=cell_address(sheet, cell_range)
        ).execute()

        values = result.get("values")
        if not values or not values[0]:
            return None
        return values[0][0]


def build_sheets_reader(config):
    config.validate()
    credentials = Credentials.from_service_account_info(config.google_credentials, scopes=SCOPES)
    service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
    logger.info("Google Sheets client ready for spreadsheet %s", config.spreadsheet_id)
    return SheetsCellReader(service)
