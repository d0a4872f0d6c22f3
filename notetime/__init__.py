import re
from collections import namedtuple

# Raw capture from a time expression, before meridiem normalization
TimeCandidate = namedtuple('TimeCandidate', ['hour', 'minute', 'meridiem'])

# Word boundary over ASCII word characters only; \s stays Unicode
WORD_BOUNDARY = (r'(?:(?<=[A-Za-z0-9_])(?![A-Za-z0-9_])'
                 r'|(?<![A-Za-z0-9_])(?=[A-Za-z0-9_]))')

# Time pattern components
TIME_COMPONENTS = {
    'at': r'(?:at\s+)?',                    # Optional "at"
    'hours': r'([0-9]{1,2})',               # 0-23, or 1-12 with meridiem
    'separator': r'[:.]?',                  # 3:30 or 3.30
    'minutes': r'([0-9]{2})?',              # 00-59
    'meridiem': r'(am|pm)?',                # am/pm
    'spaces': r'\s*'                        # Optional spaces
}

# Build time patterns
def build_time_pattern():
    """Build time pattern from components"""
    return (f"{WORD_BOUNDARY}"
            f"{TIME_COMPONENTS['at']}"
            f"{TIME_COMPONENTS['hours']}"
            f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['separator']}"
            f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['minutes']}"
            f"{TIME_COMPONENTS['spaces']}"
            f"{TIME_COMPONENTS['meridiem']}"
            f"{WORD_BOUNDARY}")

TIME_REGEX = re.compile(build_time_pattern(), re.IGNORECASE)

def normalize_hour(hour, meridiem):
    """Convert a 12-hour clock hour to 24-hour convention"""
    if meridiem == 'pm' and hour < 12:
        hour += 12
    elif meridiem == 'am' and hour == 12:
        hour = 0
    return hour

# Shared time parsing function
def parse_time_match(match):
    """Parse time candidate from regex match"""
    hour = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    meridiem = match.group(3).lower() if match.group(3) else None

    return TimeCandidate(hour, minutes, meridiem)
