GRADE_MIN = 0.0
GRADE_MAX = 20.0

# grade x 5 gives a 0-100 progress value for grades on the 0-20 scale
PROGRESS_SCALE = 5.0
PERCENT_SCALE = 100.0

DATE_LABEL_FORMAT = "%Y-%m-%d"
MISSING_KEY_LABEL = "unknown"

AVERAGE_GRADE_SERIES = "Average grade"
AVERAGE_PLAGIARISM_SERIES = "Average plagiarism (%)"
PERSONAL_GRADES_SERIES = "My grades"
CLASS_AVERAGE_SERIES = "Class average"
