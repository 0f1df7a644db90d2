"""
Sheet name derivation tests.
"""
import unittest

from sheet_otp.utils.sheet_utils import cell_address, sanitize_sheet_name


class TestSanitizeSheetName(unittest.TestCase):
    """Test email to sheet name mapping."""

    def test_replaces_non_alphanumerics(self):
        self.assertEqual(sanitize_sheet_name('user@example.com'), 'user_example_com')
        self.assertEqual(sanitize_sheet_name('a@b.com'), 'a_b_com')

    def test_keeps_letters_digits_and_case(self):
        self.assertEqual(sanitize_sheet_name('AbC123'), 'AbC123')

    def test_every_special_character_becomes_underscore(self):
        self.assertEqual(sanitize_sheet_name('a+b-c@d.e'), 'a_b_c_d_e')
        self.assertEqual(sanitize_sheet_name('é@x'), '__x')

    def test_deterministic(self):
        email = 'first.last+tag@example.co.uk'
        self.assertEqual(sanitize_sheet_name(email), sanitize_sheet_name(email))

    def test_distinct_emails_can_collide(self):
        self.assertEqual(sanitize_sheet_name('a.b@c.com'), 'a_b_c_com')
        self.assertEqual(sanitize_sheet_name('a_b@c.com'), 'a_b_c_com')


class TestCellAddress(unittest.TestCase):

    def test_a1_notation(self):
        self.assertEqual(cell_address('a_b_com', 'A3'), 'a_b_com!A3')


if __name__ == '__main__':
    unittest.main()
