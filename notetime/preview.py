#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import sys
import json
from datetime import datetime, timedelta
from typing import List, Optional

from dateutil import parser

from notetime.config import get_testing_mode, load_config
from notetime.detector import ReminderSuggestionDetector
from notetime.logger import setup_logger
from notetime.time_parser import TimeExpressionParser

# Get logger
logger = setup_logger('preview', testing=get_testing_mode())

def resolve_due_date(description: str, selected_date: datetime,
                     time_parser: Optional[TimeExpressionParser] = None) -> datetime:
    """Due date for a new reminder: the time in its description, else the picked date"""
    time_parser = time_parser or TimeExpressionParser()
    return time_parser.parse(description, selected_date) or selected_date

def format_time(dt: datetime) -> str:
    """Render as "3:30pm", a form the parser reads back to the same time"""
    hour = dt.hour % 12 or 12
    meridiem = 'am' if dt.hour < 12 else 'pm'
    return f"{hour}:{dt.minute:02d}{meridiem}"

def format_time_24(dt: datetime) -> str:
    return dt.strftime('%H:%M')

def describe(dt: datetime, now: datetime) -> str:
    """Human readable date relative to now"""
    time_str = f"{dt.hour % 12 or 12}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"
    if dt.date() == now.date():
        return f"Today at {time_str}"
    elif dt.date() == (now + timedelta(days=1)).date():
        return f"Tomorrow at {time_str}"
    return f"{dt.strftime('%A, %B')} {dt.day} at {time_str}"

class ReminderPreview:
    def __init__(self, base_date: Optional[datetime] = None, clock=None, config: Optional[dict] = None):
        logger.debug("Initializing ReminderPreview")
        self.config = config if config is not None else load_config()
        self.base_date = base_date
        self.time_parser = TimeExpressionParser(clock=clock, strict=self.config.get('strict_ranges', False))
        self.detector = ReminderSuggestionDetector(self.time_parser, confidence=self.config.get('confidence', 0.9))

    def build_item(self, dt: datetime, original_text: str) -> dict:
        now = self.time_parser.now(dt.tzinfo)
        return {
            "title": f"Remind at {format_time(dt)}",
            "subtitle": f"{describe(dt, now)} • \"{original_text.strip()}\"",
            "arg": dt.isoformat(),
            "valid": True
        }

    def generate_items(self, text: str) -> List[dict]:
        """Generate preview items"""
        logger.debug(f"Generating preview for: {text}")
        items = []

        if self.base_date is not None:
            # Reminder form: single time applied to the picked day
            found = self.time_parser.find_candidate(text)
            if found:
                candidate, match_text = found
                dt = self.time_parser.resolve(candidate, self.base_date)
                if dt:
                    items.append(self.build_item(dt, match_text))
        else:
            for detection in self.detector.detect(text):
                items.append(self.build_item(detection['suggested_date'], detection['original_text']))

        if not items:
            return [{
                "title": "No time detected",
                "subtitle": "Try \"call back at 3pm\" or \"meeting at 14:30\"",
                "valid": False
            }]
        return items

def get_base_date() -> Optional[datetime]:
    """Read the optional base date from NOTETIME_BASE_DATE"""
    value = os.getenv('NOTETIME_BASE_DATE')
    if not value:
        return None
    return parser.parse(value)

def main():
    if len(sys.argv) < 2:
        print(json.dumps({
            "items": [{
                "title": "Type a note...",
                "subtitle": "Times like 3pm or 14:30 become reminder suggestions",
                "valid": False
            }]
        }))
        return

    query = " ".join(sys.argv[1:])
    try:
        base_date = get_base_date()
    except (ValueError, OverflowError) as e:
        logger.error(f"Invalid NOTETIME_BASE_DATE: {e}")
        print(json.dumps({
            "items": [{
                "title": "Invalid base date",
                "subtitle": str(e),
                "valid": False
            }]
        }))
        sys.exit(1)

    preview = ReminderPreview(base_date=base_date)
    print(json.dumps({"items": preview.generate_items(query)}, ensure_ascii=False))

if __name__ == "__main__":
    main()
