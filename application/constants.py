"""Application-level constants."""

# Keys of the evaluation summary dict
LABELS_KEY = "labels"
CORRECT_KEY = "correct"
INCORRECT_KEY = "incorrect"
TOTAL_KEY = "total"
ERROR_RATE_KEY = "error_rate"

# Shown in logs when the error rate is undefined (nothing recorded)
UNDEFINED_RATE = "n/a"
