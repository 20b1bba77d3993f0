import unittest
import eccore


class Configuration(unittest.TestCase):

    def test_arg_parser(self):
        parser = eccore.get_arg_parser()
        options = parser.parse_known_args(['--log-level', 'debug', '-k', 'x'])[0]
        self.assertEqual(options.log_level, 'debug')
        self.assertFalse(options.no_log)
        options = parser.parse_known_args(['--no-log'])[0]
        self.assertTrue(options.no_log)

    def test_version(self):
        self.assertIsInstance(eccore.__version__, str)
        self.assertEqual(eccore.__license__, 'MIT License')


if __name__ == "__main__":
    unittest.main()
