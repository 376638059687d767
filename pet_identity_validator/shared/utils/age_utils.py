# pet_identity_validator/shared/utils/age_utils.py

"""Age parsing and date-of-birth arithmetic"""

# Standard library imports
from datetime import date
from re import IGNORECASE
from re import compile

_NUMBER = r"(\d+(?:\.\d+)?)"

# Unit patterns accept the usual vet shorthand ("3y", "18 mos", "10 wks")
_YEARS_PATTERN = compile(_NUMBER + r"\s*(?:years?|yrs?|y)", IGNORECASE)
_MONTHS_PATTERN = compile(_NUMBER + r"\s*(?:months?|mos?|m(?!\w))", IGNORECASE)
_WEEKS_PATTERN = compile(_NUMBER + r"\s*(?:weeks?|wks?|w)", IGNORECASE)


def parse_age_to_years(age_string: str | None) -> float | None:
    """Parse a free-text age phrase into fractional years

    Handles formats like "3 years", "6 months", "2 years 4 months" and
    "10 weeks". Months count as 1/12 year and weeks as 1/52 year.

    Args:
        age_string: Age phrase as it appears in the document

    Returns:
        Age in years, or None when no year/month/week component is present
    """
    if not age_string:
        return None

    total_years = 0.0
    found = False

    years_match = _YEARS_PATTERN.search(age_string)
    if years_match:
        total_years += float(years_match.group(1))
        found = True

    months_match = _MONTHS_PATTERN.search(age_string)
    if months_match:
        total_years += float(months_match.group(1)) / 12
        found = True

    weeks_match = _WEEKS_PATTERN.search(age_string)
    if weeks_match:
        total_years += float(weeks_match.group(1)) / 52
        found = True

    return total_years if found else None


def calculate_age_in_years(date_of_birth: date, today: date | None = None) -> float:
    """Calculate age in fractional years from a date of birth

    Counts completed months, so the year part is the conventional completed
    years (birthday reached or not) and the remainder adds months/12. A month
    whose day-of-birth has not arrived yet does not count: a pet born on
    30 Nov 2025 is 11/12 of a year old on 1 Nov 2026, not a full year.

    Args:
        date_of_birth: Pet's date of birth
        today: Reference date, defaults to the current date

    Returns:
        Age in years; birth dates in the future yield 0.0
    """
    today = today or date.today()
    total_months = (today.year - date_of_birth.year) * 12 + (today.month - date_of_birth.month)
    if today.day < date_of_birth.day:
        total_months -= 1
    return max(total_months, 0) / 12
