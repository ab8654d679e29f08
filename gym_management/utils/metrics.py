"""Small arithmetic helpers used by the user and workout stores."""


def calculate_bmi(weight, height):
    """BMI from weight (kg) and height (cm), rounded to 2 decimals.

    Returns None when either input is missing or height is not positive.
    """
    if weight is None or height is None or height <= 0:
        return None
    height_m = height / 100
    return round(weight / (height_m * height_m), 2)


def completion_percentage(completed, total):
    """Integer percentage of completed over total, rounded half up.

    0 when there is nothing to complete.
    """
    if total <= 0:
        return 0
    # integer arithmetic keeps .5 cases exact
    return (completed * 200 + total) // (total * 2)
