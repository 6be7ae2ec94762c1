import re

_PACKAGE_NAME = re.compile(r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*")


def is_valid_package_name(name: str) -> bool:
    return _PACKAGE_NAME.fullmatch(name) is not None


def to_valid_package_name(name: str) -> str:
    """Best-effort normalization into a package.json name.

    The result is not guaranteed to validate (e.g. an empty string stays
    empty), so callers should check it again.
    """
    name = name.strip().lower()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"^[._]", "", name)
    return re.sub(r"[^a-z0-9\-~]+", "-", name)
