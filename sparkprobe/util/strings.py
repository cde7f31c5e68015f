# (c) Copyright IBM Corp. 2025

"""
Text extraction helpers used to pull identifiers out of classpaths, JVM
arguments and launch commands.
"""

import re
from typing import List, Optional, Union


def extract_by_regex(text: Optional[str], pattern: Union[str, re.Pattern]) -> List[str]:
    """
    Returns every match of <pattern> in <text>, in order of appearance.

    When the pattern has a capture group the first group is returned for each
    match, otherwise the whole match is.

    @param text: the text to search, may be None
    @param pattern: a regular expression string or compiled pattern
    @return: list of matched strings, empty when nothing matches
    """
    if not text:
        return []

    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    matches = []
    for match in regex.finditer(text):
        if regex.groups:
            matches.append(match.group(1))
        else:
            matches.append(match.group(0))
    return matches


def get_argument_value(command_text: Optional[str], flag_name: str) -> Optional[str]:
    """
    Finds the value passed to <flag_name> in a launch command.

    Both "--flag value" and "--flag=value" forms are accepted.

    @param command_text: the full command as a single string
    @param flag_name: the flag to look for, e.g. "--class"
    @return: the value or None when the flag or its value is missing
    """
    if not command_text or not flag_name:
        return None

    prefix = f"{flag_name}="
    tokens = command_text.split()
    for idx, token in enumerate(tokens):
        if token == flag_name:
            if idx + 1 < len(tokens):
                return tokens[idx + 1]
            return None
        if token.startswith(prefix):
            return token[len(prefix):] or None
    return None
