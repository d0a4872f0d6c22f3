import unittest
from unittest import mock
from datetime import datetime
import io
import json
import os
import sys

# Add the parent directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from notetime import preview
from notetime.preview import (ReminderPreview, describe, format_time, format_time_24,
                              resolve_due_date)
from notetime.time_parser import TimeExpressionParser

DEFAULTS = {'testing_mode': False, 'strict_ranges': False, 'confidence': 0.9}

class TestFormatting(unittest.TestCase):
    def test_format_time(self):
        test_cases = [
            (datetime(2024, 6, 1, 0, 0), "12:00am"),
            (datetime(2024, 6, 1, 9, 5), "9:05am"),
            (datetime(2024, 6, 1, 12, 0), "12:00pm"),
            (datetime(2024, 6, 1, 15, 30), "3:30pm"),
            (datetime(2024, 6, 1, 23, 59), "11:59pm"),
        ]

        for dt, expected in test_cases:
            with self.subTest(dt=dt):
                self.assertEqual(format_time(dt), expected)

    def test_format_time_24(self):
        self.assertEqual(format_time_24(datetime(2024, 6, 1, 7, 5)), "07:05")

    def test_describe(self):
        now = datetime(2024, 6, 1, 12, 0)
        test_cases = [
            (datetime(2024, 6, 1, 15, 30), "Today at 3:30 PM"),
            (datetime(2024, 6, 2, 9, 0), "Tomorrow at 9:00 AM"),
            (datetime(2024, 6, 5, 0, 15), "Wednesday, June 5 at 12:15 AM"),
        ]

        for dt, expected in test_cases:
            with self.subTest(dt=dt):
                self.assertEqual(describe(dt, now), expected)

class TestResolveDueDate(unittest.TestCase):
    def test_time_in_description(self):
        selected = datetime(2024, 6, 3, 10, 0)
        self.assertEqual(resolve_due_date("Call at 3pm", selected), datetime(2024, 6, 3, 15, 0))

    def test_falls_back_to_selected_date(self):
        selected = datetime(2024, 6, 3, 10, 0)
        self.assertEqual(resolve_due_date("send the brochure", selected), selected)

    def test_past_time_not_moved(self):
        selected = datetime(2000, 1, 1)
        self.assertEqual(resolve_due_date("Meeting at 14:30", selected), datetime(2000, 1, 1, 14, 30))

    def test_strict_parser_falls_back(self):
        selected = datetime(2024, 6, 3, 10, 0)
        strict = TimeExpressionParser(strict=True)
        self.assertEqual(resolve_due_date("at 27:00", selected, strict), selected)

class TestReminderPreview(unittest.TestCase):
    def setUp(self):
        self.now = datetime(2024, 6, 1, 12, 0)
        self.clock = lambda: self.now

    def test_items_for_note(self):
        reminder_preview = ReminderPreview(clock=self.clock, config=DEFAULTS)
        items = reminder_preview.generate_items("call at 3pm then 9am")
        self.assertEqual([item['title'] for item in items], ["Remind at 3:00pm", "Remind at 9:00am"])
        self.assertEqual(items[0]['subtitle'], "Today at 3:00 PM • \"at 3pm\"")
        self.assertEqual(items[1]['subtitle'], "Tomorrow at 9:00 AM • \"9am\"")
        self.assertEqual(items[0]['arg'], "2024-06-01T15:00:00")
        self.assertTrue(all(item['valid'] for item in items))

    def test_items_for_base_date(self):
        reminder_preview = ReminderPreview(base_date=datetime(2024, 6, 10), clock=self.clock, config=DEFAULTS)
        items = reminder_preview.generate_items("call at 8am, or 5pm")
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0]['arg'], "2024-06-10T08:00:00")
        self.assertEqual(items[0]['subtitle'], "Monday, June 10 at 8:00 AM • \"at 8am\"")

    def test_no_time_item(self):
        reminder_preview = ReminderPreview(clock=self.clock, config=DEFAULTS)
        items = reminder_preview.generate_items("call back around lunch")
        self.assertEqual(len(items), 1)
        self.assertFalse(items[0]['valid'])
        self.assertEqual(items[0]['title'], "No time detected")

    def test_config_strict_and_confidence(self):
        config = dict(DEFAULTS, strict_ranges=True, confidence=0.4)
        reminder_preview = ReminderPreview(clock=self.clock, config=config)
        self.assertTrue(reminder_preview.time_parser.strict)
        self.assertEqual(reminder_preview.detector.confidence, 0.4)
        items = reminder_preview.generate_items("at 30:00")
        self.assertFalse(items[0]['valid'])

class TestMain(unittest.TestCase):
    def run_main(self, argv, env=None):
        env = env or {}
        with mock.patch.object(sys, 'argv', ['notetime-preview'] + argv), \
                mock.patch.dict(os.environ, env), \
                mock.patch.object(preview, 'load_config', return_value=dict(DEFAULTS)), \
                mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
            preview.main()
        return json.loads(stdout.getvalue())

    def test_no_arguments(self):
        output = self.run_main([])
        self.assertFalse(output['items'][0]['valid'])

    def test_with_base_date(self):
        output = self.run_main(["call", "at", "3:30pm"], {'NOTETIME_BASE_DATE': '2024-06-01'})
        self.assertEqual(output['items'][0]['arg'], "2024-06-01T15:30:00")

    def test_invalid_base_date(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_main(["at 3pm"], {'NOTETIME_BASE_DATE': 'not a date'})
        self.assertEqual(cm.exception.code, 1)

if __name__ == '__main__':
    unittest.main()
