"""Application-wide constants.

Point values and thresholds are part of the matching contract and are not
configurable at runtime.
"""

# Aggregate Score
MAX_SCORE = 100  # Final score is clamped to this ceiling
MIN_SUITABLE_SCORE = 40  # Suitability threshold (inclusive)

# Category Classifier
CATEGORY_SAME_SCORE = 20  # Job category identical to the user's
CATEGORY_RELATED_SCORE = 10  # Job category merely compatible
CATEGORY_UNKNOWN_SCORE = 10  # Lenient pass when either side is unclassified

# Location Matcher
LOCATION_REMOTE_SCORE = 25  # Remote job and user accepts remote work
LOCATION_PREFERRED_SCORE = 25  # Job in one of the preferred locations
LOCATION_CURRENT_SCORE = 20  # Job in the user's current location
LOCATION_RELOCATION_SCORE = 15  # Outside preferred areas, willing to relocate
LOCATION_ONSITE_MISMATCH_SCORE = 10  # Remote-only job, user prefers on-site (soft)

# Remote Preference Matcher
REMOTE_MATCH_SCORE = 20
REMOTE_FLEXIBLE_SCORE = 15
REMOTE_MISMATCH_SCORE = 10

# Skills Matcher
SKILLS_MAX_SCORE = 25
SKILLS_NAMED_IN_REASON = 3  # Primary skills listed by name in the reason

# Experience Matcher
EXPERIENCE_MATCH_SCORE = 15
EXPERIENCE_NEUTRAL_SCORE = 10
EXPERIENCE_MISMATCH_SCORE = 5

# Job-Type Affinity Matcher
JOB_TYPE_MATCH_SCORE = 10
JOB_TYPE_PARTIAL_SCORE = 8
JOB_TYPE_MISMATCH_SCORE = 5

# Batch Defaults
DEFAULT_MIN_SCORE = MIN_SUITABLE_SCORE
DEFAULT_MAX_RESULTS = 50
DEFAULT_SORT_BY = "score"

# Statistics Bands (lower bounds, inclusive)
EXCELLENT_MATCH_THRESHOLD = 80
GOOD_MATCH_THRESHOLD = 60
MODERATE_MATCH_THRESHOLD = MIN_SUITABLE_SCORE

# Logging
MAX_JOB_TITLE_LOG_LENGTH = 60  # Maximum job title length in console logs (default)
