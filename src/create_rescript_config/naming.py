"""npm package name rules.

Mirrors the checks npm applies to new package names. Only the errors
that make a name unpublishable are reported.
"""

import re
from typing import List
from urllib.parse import quote

MAX_LENGTH = 214

BLACKLIST = ("node_modules", "favicon.ico")

SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")
SCOPED_NAME = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")


def _url_safe(part: str) -> bool:
    # Same set encodeURIComponent leaves unescaped
    return quote(part, safe="!'()*") == part


def validate_package_name(name) -> List[str]:
    """Validate a package name.

    Args:
        name: Candidate package name

    Returns:
        Error messages in rule order (empty if the name is valid)
    """
    if name is None:
        return ["name cannot be null"]
    if not isinstance(name, str):
        return ["name must be a string"]

    errors = []

    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    for blacklisted in BLACKLIST:
        if name.lower() == blacklisted:
            errors.append(f"{blacklisted} is a blacklisted name")

    if len(name) > MAX_LENGTH:
        errors.append(f"name can no longer contain more than {MAX_LENGTH} characters")
    if name.lower() != name:
        errors.append("name can no longer contain capital letters")
    if SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        errors.append("name can no longer contain special characters (\"~'!()*\")")

    if not _url_safe(name):
        match = SCOPED_NAME.match(name)
        scoped_ok = (
            match is not None
            and match.group(1) is not None
            and _url_safe(match.group(1))
            and _url_safe(match.group(2))
        )
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return errors


def first_error(name) -> str:
    """Return the first validation error, or an empty string."""
    errors = validate_package_name(name)
    return errors[0] if errors else ""
