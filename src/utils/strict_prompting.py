import re

# Doubled braces are literal text, not placeholders
_PLACEHOLDER = re.compile(r'(?<!\{)\{(\w+)\}(?!\})')


def placeholders(template: str) -> set[str]:
    """Return the set of {placeholder} names used in a template."""
    return set(_PLACEHOLDER.findall(template))


def strict_format(template: str, **kwargs) -> str:
    """
    Format a prompt template with strict validation.
    Raises ValueError if provided vars don't exactly match placeholders.
    """
    expected = placeholders(template)
    provided = set(kwargs.keys())

    missing = expected - provided
    extra = provided - expected

    if missing:
        raise ValueError(f"Missing required variables: {sorted(missing)}")
    if extra:
        raise ValueError(f"Unexpected variables provided: {sorted(extra)}")

    return template.format(**kwargs)
