"""Test cases for HTML output cleanup."""

import unittest

from richdoc_renderer.utils.sanitizer import OutputSanitizer, clean_output


class OutputSanitizerTest(unittest.TestCase):
    """Test the ordered cleanup rules."""

    def setUp(self):
        self.sanitizer = OutputSanitizer()

    def test_rule_replacements(self):
        test_cases = [
            ('Fish & Chips', 'Fish &amp; Chips'),
            ('Fish &amp; Chips', 'Fish &amp; Chips'),      # Existing entity untouched
            ('&#169; &#x2014;', '&#169; &#x2014;'),
            ('AT&T;', 'AT&amp;T;'),                         # Not a known entity name
            ('Q&A; &lt;b&gt;', 'Q&amp;A; &lt;b&gt;'),
            ('a \u2014 b', 'a &mdash; b'),                  # Em dash
            ('it\u2019s', "it's"),                           # Right single quote
            ('\u201chi\u201d', '"hi"'),                      # Double smart quotes
            ('a&nbsp;b', 'a b'),
            ('a\u00a0b', 'a b'),
            ('<ul><li></li><LI></LI><li>x</li></ul>', '<ul><li>x</li></ul>'),
            ('<strong> \r\n</strong>x', 'x'),
            ('<STRONG>\t</STRONG>', ''),
            ('\tindented', '    indented'),
            ('', ''),
        ]

        for input_text, expected in test_cases:
            result = self.sanitizer.sanitize(input_text)
            self.assertEqual(result, expected, f"Failed for input: {repr(input_text)}")

    def test_nbsp_before_smart_quotes(self):
        self.assertEqual(clean_output('&nbsp;\u201c\u2019'), ' "\'')
        self.assertEqual(clean_output('\u00a0\u201d\u2019'), ' "\'')

    def test_strong_with_text_is_kept(self):
        self.assertEqual(clean_output('<strong> bold </strong>'), '<strong> bold </strong>')

    def test_empty_bold_list_item_is_removed_entirely(self):
        self.assertEqual(clean_output('<ul><li><strong> </strong></li></ul>'), '<ul></ul>')

    def test_sanitize_is_idempotent(self):
        samples = [
            'Tom & Jerry \u2014 \u201cclassic\u201d',
            '<ul class="list">\n\t<li></li>\r\t<li>x&nbsp;y</li>\n</ul>',
            '<li><strong>\t</strong></li>&amp;&',
            '<p>R&D\u00a0costs\u2019</p>',
            'AT&T; Q&A; &copy;',
        ]
        for sample in samples:
            once = clean_output(sample)
            self.assertEqual(clean_output(once), once, f"Not idempotent for {repr(sample)}")


if __name__ == '__main__':
    unittest.main()
