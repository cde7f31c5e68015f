# (c) Copyright IBM Corp. 2025

import re
from typing import List, Optional

import pytest

from sparkprobe.util.strings import extract_by_regex, get_argument_value


class TestExtractByRegex:
    @pytest.mark.parametrize(
        "text, pattern, expected",
        [
            (
                "/appcache/application_1700000000000_0042/container_01:/jars/*",
                r"application_[\w_]+",
                ["application_1700000000000_0042"],
            ),
            (
                "application_1_1 and application_2_2",
                r"application_[\w_]+",
                ["application_1_1", "application_2_2"],
            ),
            ("--name nightly-etl --queue default", r"--name\s+(\S+)", ["nightly-etl"]),
            ("no identifiers here", r"application_[\w_]+", []),
            ("", r"application_[\w_]+", []),
            (None, r"application_[\w_]+", []),
        ],
        ids=["single", "multiple_in_order", "capture_group", "no_match", "empty", "none"],
    )
    def test_extract_by_regex(
        self, text: Optional[str], pattern: str, expected: List[str]
    ) -> None:
        assert extract_by_regex(text, pattern) == expected

    def test_extract_by_regex_compiled_pattern(self) -> None:
        regex = re.compile(r"app-\d+")
        assert extract_by_regex("x app-1 y app-22", regex) == ["app-1", "app-22"]

    def test_extract_by_regex_keeps_empty_matches(self) -> None:
        assert extract_by_regex("ab", r"x*") == ["", "", ""]


class TestGetArgumentValue:
    @pytest.mark.parametrize(
        "command, flag, expected",
        [
            ("Main --jar /path/to/app.jar --class com.example.Main", "--jar", "/path/to/app.jar"),
            ("Main --jar /path/to/app.jar --class com.example.Main", "--class", "com.example.Main"),
            ("Main --class=com.example.Main", "--class", "com.example.Main"),
            ("Main   --jar\t/spaced/app.jar", "--jar", "/spaced/app.jar"),
            ("Main --jar /path/to/app.jar", "--class", None),
            ("Main --class", "--class", None),
            ("Main --class=", "--class", None),
            ("Main --classpath /x", "--class", None),
            ("", "--class", None),
            (None, "--class", None),
        ],
        ids=[
            "jar",
            "class",
            "equals_form",
            "extra_whitespace",
            "missing_flag",
            "missing_value",
            "empty_equals_value",
            "prefix_is_not_flag",
            "empty_command",
            "none_command",
        ],
    )
    def test_get_argument_value(
        self, command: Optional[str], flag: str, expected: Optional[str]
    ) -> None:
        assert get_argument_value(command, flag) == expected
