"""
Message formatting with printf-style placeholder padding.

    format_message("x")            -> "x"
    format_message("x", 1, 2)      -> "x 1 2"
    format_message("val=%d", 5)    -> "val=5"
    format_message(42, "a")        -> "42 a"

'%v' is accepted as the "default representation" verb and behaves
like '%s'. Formatting never raises: a template that does not match
its values is returned as-is followed by a %!(BADFORMAT ...) marker.
"""

import re
from typing import Any

PAD_VERB = '%v'

# Matches an escaped percent or the %v verb, so "%%v" stays literal
_VERB_RE = re.compile(r'%([%v])')


def _translate_verb(match) -> str:
    return '%%' if match.group(1) == '%' else '%s'


def _interpolate(template: str, values: tuple) -> str:
    """Apply %-interpolation, rendering mismatches inline."""
    try:
        return _VERB_RE.sub(_translate_verb, template) % values
    except (TypeError, ValueError, KeyError):
        rendered = ', '.join(repr(v) for v in values)
        return f"{template} %!(BADFORMAT {rendered})"


def format_message(template: Any, *values: Any) -> str:
    """Render template against values.

    A string template without any '%' gets one ' %v' appended per
    value so extra values still show up. Non-string templates are
    converted with str() and always padded.

    Args:
        template: Format string or any object
        *values: Values for the placeholders

    Returns:
        The formatted message
    """
    if isinstance(template, str):
        msg = template
        if not values:
            return msg
        if '%' not in msg:
            msg += (' ' + PAD_VERB) * len(values)
    else:
        msg = str(template)
        if not values:
            return msg
        msg += (' ' + PAD_VERB) * len(values)
    return _interpolate(msg, values)
