"""Unit tests for CamelCaseRule (W9501, W9502, W9503)."""

import unittest

from naming_convention_linter.domain.rules.camel_case import CamelCaseRule


class TestCamelCaseRuleTypeNames(unittest.TestCase):
    """require_initial_upper=True: UpperCamelCase for types."""

    def setUp(self) -> None:
        self.rule = CamelCaseRule()

    def test_conventional_type_name_passes(self) -> None:
        self.assertIsNone(self.rule.check("Parser", require_initial_upper=True))
        self.assertIsNone(self.rule.check("HttpServer", require_initial_upper=True))

    def test_lowercase_start_reports_w9502(self) -> None:
        for name in ("myClass", "hTMLParser"):
            with self.subTest(name=name):
                finding = self.rule.check(name, require_initial_upper=True)
                assert finding is not None
                self.assertEqual(finding.code, "W9502")
                self.assertEqual(finding.message_args, (name,))

    def test_consecutive_capitals_report_w9503(self) -> None:
        finding = self.rule.check("HTTPServer", require_initial_upper=True)
        assert finding is not None
        self.assertEqual(finding.code, "W9503")

    def test_single_uppercase_letter_passes(self) -> None:
        self.assertIsNone(self.rule.check("T", require_initial_upper=True))


class TestCamelCaseRuleMemberNames(unittest.TestCase):
    """require_initial_upper=False: lowerCamelCase for methods, fields, parameters."""

    def setUp(self) -> None:
        self.rule = CamelCaseRule()

    def test_conventional_member_names_pass(self) -> None:
        for name in ("doWork", "x", "parse_file", "value2"):
            with self.subTest(name=name):
                self.assertIsNone(self.rule.check(name, require_initial_upper=False))

    def test_uppercase_start_reports_w9501_and_stops(self) -> None:
        # DoWORK would also fail the scan; the start check wins and stops.
        for name in ("DoWork", "DoWORK"):
            with self.subTest(name=name):
                finding = self.rule.check(name, require_initial_upper=False)
                assert finding is not None
                self.assertEqual(finding.code, "W9501")

    def test_acronym_run_reports_w9503(self) -> None:
        for name in ("getHTTPCode", "myHTTP", "parseURL"):
            with self.subTest(name=name):
                finding = self.rule.check(name, require_initial_upper=False)
                assert finding is not None
                self.assertEqual(finding.code, "W9503")

    def test_separated_capitals_pass(self) -> None:
        self.assertIsNone(self.rule.check("aBcDeF", require_initial_upper=False))

    def test_uncased_start_reports_w9503_regardless_of_requirement(self) -> None:
        for name in ("2fast", "_private", "$cash", "中文"):
            for upper in (True, False):
                with self.subTest(name=name, upper=upper):
                    finding = self.rule.check(name, require_initial_upper=upper)
                    assert finding is not None
                    self.assertEqual(finding.code, "W9503")

    def test_empty_name_reports_w9503(self) -> None:
        finding = self.rule.check("", require_initial_upper=False)
        assert finding is not None
        self.assertEqual(finding.code, "W9503")
        self.assertEqual(finding.message_args, ("",))


class TestCamelCaseRuleUnicode(unittest.TestCase):
    """Scan works on code points, including characters outside the BMP."""

    def setUp(self) -> None:
        self.rule = CamelCaseRule()

    def test_non_ascii_cased_letters(self) -> None:
        self.assertIsNone(self.rule.check("Élan", require_initial_upper=True))
        finding = self.rule.check("éLAN", require_initial_upper=False)
        assert finding is not None
        self.assertEqual(finding.code, "W9503")

    def test_astral_uppercase_letters_count_as_capitals(self) -> None:
        # U+1D400 MATHEMATICAL BOLD CAPITAL A is a single code point, category Lu.
        bold_a = "\U0001d400"
        finding = self.rule.check("x" + bold_a + bold_a, require_initial_upper=False)
        assert finding is not None
        self.assertEqual(finding.code, "W9503")
        self.assertIsNone(self.rule.check("x" + bold_a + "y", require_initial_upper=False))
