"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

U64_MAX = 2**64 - 1

# Segment handles. 255 is reserved, so valid handles are 0..254.
MAX_SEGMENT_HANDLE = 254
COUNTER_SEGMENT = 0
ATTENDANCE_SEGMENT = 5
EMPLOYEE_SEGMENT = 6
KNOWN_SEGMENTS = (COUNTER_SEGMENT, ATTENDANCE_SEGMENT, EMPLOYEE_SEGMENT)

DEFAULT_MAX_RECORD_SIZE = 1024
