import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(text: str) -> bool:
    return bool(EMAIL_PATTERN.match(str(text or "").strip()))
