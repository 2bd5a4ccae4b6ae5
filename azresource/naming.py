import re
import uuid

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")

# Storage account names are the strictest: 3-24 lowercase letters and digits.
MIN_LENGTH = 3


def random_resource_name(prefix: str, max_len: int = 24) -> str:
    """
    Return ``prefix`` (lowercased, alphanumeric only) followed by random hex
    characters, at most ``max_len`` long.
    """
    if max_len < MIN_LENGTH:
        raise ValueError(f"max_len must be at least {MIN_LENGTH}, got {max_len}")

    clean = _NON_ALNUM_RE.sub("", prefix.lower())
    # keep at least half of the name random so repeated runs do not collide
    clean = clean[: max_len // 2]
    suffix = ""
    while len(clean) + len(suffix) < max_len:
        suffix += uuid.uuid4().hex
    return (clean + suffix)[:max_len]
