import re

_NON_ALNUM = re.compile(r'[^a-zA-Z0-9]')


def sanitize_sheet_name(email):
    """Turn an email into the sheet name that holds that user's record.

    user@example.com -> user_example_com
    """
    return _NON_ALNUM.sub('_', email)


def cell_address(sheet, cell_range):
    return f"{sheet}!{cell_range}"
