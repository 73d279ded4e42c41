import re

_DISALLOWED = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_]+")
_HYPHEN_RUNS = re.compile(r"-+")


def generate_slug(title: str) -> str:
    slug = title.lower().strip()
    slug = _DISALLOWED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")


def suffixed_slug(base: str, counter: int) -> str:
    if counter == 0:
        return base
    return f"{base}-{counter}"
