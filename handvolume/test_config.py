import unittest
from unittest.mock import patch

from handvolume.__main__ import main, parse_args, split_args
from handvolume.config import AppConfig, ClassifierConfig


class TestConfig(unittest.TestCase):

    def test_defaults_are_valid(self):
        config = AppConfig().validate()
        self.assertEqual(config.max_level, 15)
        self.assertEqual(config.classifier.threshold_cut, 60)
        self.assertEqual(config.classifier.min_contour_area, 100.0)

    def test_invalid_values(self):
        for bad in (ClassifierConfig(blur_kernel=0), ClassifierConfig(threshold_cut=300),
                    ClassifierConfig(min_contour_area=-1), ClassifierConfig(max_angle=0)):
            with self.assertRaises(ValueError):
                bad.validate()
        with self.assertRaises(ValueError):
            AppConfig(max_level=-1).validate()
        with self.assertRaises(ValueError):
            AppConfig(classifier=ClassifierConfig(blur_kernel=2)).validate()


class TestParseArgs(unittest.TestCase):

    def test_defaults(self):
        config = parse_args([])
        self.assertEqual(config.camera_index, 0)
        self.assertTrue(config.mirror)
        self.assertTrue(config.show_overlay)

    def test_options(self):
        config = parse_args(["--camera", "1", "--width", "320", "--height", "240",
                             "--no-mirror", "--max-level", "100", "--no-overlay",
                             "--log-level", "DEBUG"])
        self.assertEqual(config.camera_index, 1)
        self.assertEqual(config.resolution, (320, 240))
        self.assertFalse(config.mirror)
        self.assertEqual(config.max_level, 100)
        self.assertFalse(config.show_overlay)
        self.assertEqual(config.log_level, "DEBUG")

    def test_qt_arguments_are_ignored(self):
        config = parse_args(["-style", "fusion", "--max-level", "7"])
        self.assertEqual(config.max_level, 7)

    def test_unknown_options_are_returned(self):
        config, rest = split_args(["--camera", "2", "--max-levle", "10"])
        self.assertEqual(config.max_level, 15)
        self.assertEqual(config.camera_index, 2)
        self.assertEqual(rest, ["--max-levle", "10"])

    def test_unknown_options_are_logged(self):
        with patch("logging.basicConfig"), \
                patch("handvolume.core.core.AppCore") as core:
            core.return_value.run.return_value = 0
            with self.assertLogs("handvolume.__main__", level="DEBUG") as logs:
                code = main(["hand-volume", "--max-levle", "10"])
        self.assertEqual(code, 0)
        self.assertIn("--max-levle 10", logs.output[0])
        config = core.call_args[0][1]
        self.assertEqual(config.max_level, 15)


if __name__ == "__main__":
    unittest.main()
