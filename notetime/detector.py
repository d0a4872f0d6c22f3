#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import re
from typing import List, Optional

from notetime import TIME_REGEX
from notetime.config import get_testing_mode
from notetime.logger import setup_logger
from notetime.time_parser import TimeExpressionParser

logger = setup_logger('detector', testing=get_testing_mode())

# First line of an auto-generated call note, e.g. "Call with Jane Doe - 6/1/2024"
CALL_HEADER_PATTERN = re.compile(r'^Call with .* - ')

class ReminderSuggestionDetector:
    def __init__(self, parser: Optional[TimeExpressionParser] = None, confidence: float = 0.9):
        self.parser = parser or TimeExpressionParser()
        self.confidence = confidence

    def strip_call_header(self, text: str) -> str:
        """Drop the call header line so its date is not read as a time"""
        lines = text.split('\n')
        if lines and CALL_HEADER_PATTERN.match(lines[0]):
            return '\n'.join(lines[1:])
        return text

    def detect(self, text: str) -> List[dict]:
        """Find every time mentioned in a note and suggest a reminder for each"""
        if not text:
            return []

        detections = []
        for match in TIME_REGEX.finditer(self.strip_call_header(text)):
            match_text = match.group(0)
            suggested_date = self.parser.parse(match_text, self.parser.now(), adjust_to_future=True)
            if suggested_date:
                detections.append({
                    'original_text': match_text,
                    'suggested_date': suggested_date,
                    'type': 'time',
                    'confidence': self.confidence
                })

        # Keep the first suggestion for each hour and minute
        seen = set()
        unique = []
        for detection in detections:
            key = (detection['suggested_date'].hour, detection['suggested_date'].minute)
            if key not in seen:
                seen.add(key)
                unique.append(detection)

        logger.debug(f"Detected {len(unique)} time(s) in note: {[d['original_text'] for d in unique]}")
        return unique

def detect_times_in_text(text: str, clock=None) -> List[dict]:
    return ReminderSuggestionDetector(TimeExpressionParser(clock=clock)).detect(text)
