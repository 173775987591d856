"""Rewrite Hoppscotch ``<<var>>`` references into Postman ``{{var}}`` syntax."""

import re

VARIABLE_PATTERN = re.compile(r"<<([^>]+)>>")


def rewrite_variables(text: str) -> str:
    """Replace every ``<<name>>`` in text with ``{{name}}``."""
    return VARIABLE_PATTERN.sub(r"{{\1}}", text)
