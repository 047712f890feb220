import unittest
from unittest.mock import patch

from webforms.exceptions import ConfigurationError
from webforms.options import (
    FieldOptions, EmailOptions, PasswordOptions, URLOptions, ChoiceOptions
)


class TestOptions(unittest.TestCase):

    def test_from_none(self):
        options = EmailOptions.from_value(None)
        self.assertIsNone(options.blank)
        self.assertIsNone(options.expression)

    def test_from_dict(self):
        options = PasswordOptions.from_value({'salt': 'x', 'algorithm': 'sha256', 'blank': False})
        self.assertEqual(options.salt, 'x')
        self.assertEqual(options.algorithm, 'sha256')
        self.assertFalse(options.blank)

    def test_same_record_is_reused(self):
        options = URLOptions(absolute=True)
        self.assertIs(URLOptions.from_value(options), options)

    def test_other_record_is_converted(self):
        options = EmailOptions.from_value(FieldOptions(blank=True))
        self.assertIsInstance(options, EmailOptions)
        self.assertTrue(options.blank)

    def test_unknown_keys_are_ignored(self):
        with patch.object(FieldOptions._logger, 'debug') as mock_debug:
            options = FieldOptions.from_value({'blank': False, 'colour': 'red'})
        self.assertFalse(options.blank)
        self.assertFalse(hasattr(options, 'colour'))
        mock_debug.assert_called_once()

    def test_invalid_container(self):
        with self.assertRaises(ConfigurationError):
            FieldOptions.from_value(['blank'])

    def test_password_defaults(self):
        options = PasswordOptions()
        self.assertEqual(options.salt, '')
        self.assertEqual(options.algorithm, 'sha512')
        options = PasswordOptions(salt=None, algorithm=None)
        self.assertEqual(options.salt, '')
        self.assertEqual(options.algorithm, 'sha512')

    def test_url_absolute_is_strict(self):
        self.assertFalse(URLOptions().absolute)
        self.assertTrue(URLOptions(absolute=True).absolute)
        self.assertFalse(URLOptions(absolute=1).absolute)

    def test_choice_defaults(self):
        self.assertEqual(ChoiceOptions().choices, [])
        self.assertEqual(ChoiceOptions(choices=None).choices, [])
        self.assertIsNot(ChoiceOptions().choices, ChoiceOptions().choices)


if __name__ == '__main__':
    unittest.main()
