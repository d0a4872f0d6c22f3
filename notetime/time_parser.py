#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from datetime import datetime
from typing import Callable, Optional, Tuple

from dateutil.relativedelta import relativedelta

from notetime import TIME_REGEX, TimeCandidate, normalize_hour, parse_time_match
from notetime.config import get_testing_mode
from notetime.logger import setup_logger

# Get logger
logger = setup_logger('time_parser', testing=get_testing_mode())

class TimeExpressionParser:
    """Resolve a clock time written in free text onto a calendar day.

    Recognized forms include "3pm", "3:30pm", "at 3:30", "14:30" and
    "12.30". Only the first time expression in the text is used.

    ``clock`` returns the current moment and is only consulted when
    adjusting to the future. With ``strict`` set, hours and minutes outside
    their clock ranges are treated as no match instead of carrying over
    into the following day(s).
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None, strict: bool = False):
        self.clock = clock
        self.strict = strict

    def now(self, tz=None) -> datetime:
        if self.clock:
            return self.clock()
        return datetime.now(tz)

    def find_candidate(self, description: str) -> Optional[Tuple[TimeCandidate, str]]:
        """Find the first time expression and return it with the matched text"""
        if not description:
            return None

        match = TIME_REGEX.search(description)
        if not match:
            return None

        candidate = parse_time_match(match)
        logger.debug(f"Matched '{match.group(0)}' as {candidate}")
        return candidate, match.group(0)

    def is_in_range(self, candidate: TimeCandidate) -> bool:
        if candidate.minute > 59:
            return False
        if candidate.meridiem:
            return 1 <= candidate.hour <= 12
        return candidate.hour <= 23

    def resolve(self, candidate: TimeCandidate, base_date: datetime,
                adjust_to_future: bool = False) -> Optional[datetime]:
        """Apply a time candidate to the calendar day of base_date"""
        if self.strict and not self.is_in_range(candidate):
            logger.debug(f"Rejecting out-of-range time {candidate}")
            return None

        hour = normalize_hour(candidate.hour, candidate.meridiem)

        # Out-of-range values carry over instead of raising
        midnight = base_date.replace(hour=0, minute=0, second=0, microsecond=0)
        try:
            result = midnight + relativedelta(hours=hour, minutes=candidate.minute)

            if adjust_to_future and result <= self.now(result.tzinfo):
                result += relativedelta(days=1)
                logger.debug(f"Time already passed, moved to {result}")
        except OverflowError as e:
            logger.debug(f"Cannot place {candidate} on {base_date.date()}: {e}")
            return None

        return result

    def parse(self, description: str, base_date: Optional[datetime] = None,
              adjust_to_future: bool = False) -> Optional[datetime]:
        """Parse time from text, returning None if no time is found"""
        found = self.find_candidate(description)
        if not found:
            return None

        candidate, _ = found
        if base_date is None:
            base_date = self.now()
        return self.resolve(candidate, base_date, adjust_to_future)

def parse_time_from_description(description: str, base_date: Optional[datetime] = None,
                                adjust_to_future: bool = False,
                                clock: Optional[Callable[[], datetime]] = None) -> Optional[datetime]:
    """Parse time from a text description onto base_date (defaults to now)"""
    return TimeExpressionParser(clock=clock).parse(description, base_date, adjust_to_future)
