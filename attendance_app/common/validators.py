# /attendance_app/common/validators.py

from typing import Optional, Union


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field_name} must not be empty.")
    return value.strip()


def parse_target_days(value: Union[str, int, None]) -> Optional[int]:
    """
    Parses the optional target day count typed into a class form.

    Blank or missing input means "no target". Anything else must be a whole
    number of at least 1; non-numeric text is rejected instead of silently
    turning into a non-number.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Target days must be a whole number.")
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = int(text)
        except ValueError:
            raise ValueError("Target days must be a whole number.") from None
    if number < 1:
        raise ValueError("Target days must be at least 1.")
    return number
