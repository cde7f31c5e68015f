# (c) Copyright IBM Corp. 2025

"""
Best-effort resolution of a single configuration value of a Spark process.

A value is looked up in the following order, the first non-empty answer wins:
  1. the system property store
  2. a regular expression match in the classpath
  3. a regular expression match in the JVM input arguments, scanned in order
  4. the live configuration object of the host framework, if loaded here

Nothing is cached: every call reads the current state of the process.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from sparkprobe.config_source import ReflectiveConfigSource, config_source_for
from sparkprobe.context import ProcessContext
from sparkprobe.log import logger
from sparkprobe.options import DEFAULT_APP_ID_REGEX
from sparkprobe.util.strings import extract_by_regex

APP_ID_KEY = "spark.app.id"
APP_NAME_KEY = "spark.app.name"

PatternType = Union[str, re.Pattern, None]


@dataclass(frozen=True)
class ProbeKey:
    property_key: str
    pattern: PatternType = None


APP_ID = ProbeKey(APP_ID_KEY, DEFAULT_APP_ID_REGEX)
APP_NAME = ProbeKey(APP_NAME_KEY)


def _first_non_empty(candidates: Iterable[str]) -> Optional[str]:
    for candidate in candidates:
        if candidate:
            return candidate
    return None


class ConfigProbe(object):
    def __init__(
        self,
        context: ProcessContext,
        config_source: Optional[ReflectiveConfigSource] = None,
    ) -> None:
        self.context = context
        self.config_source = (
            config_source if config_source is not None else config_source_for(context.pid)
        )

    def resolve_key(self, key: ProbeKey) -> Optional[str]:
        return self.resolve(key.pattern, key.property_key)

    def resolve(self, pattern: PatternType, property_key: str) -> Optional[str]:
        """
        Resolves <property_key>, using <pattern> for the classpath and argument
        stages.  A None pattern skips those stages.

        @return: the value or None when no stage yields one
        """
        value = self.from_properties(property_key)
        if value:
            return value

        regex = self._compile(pattern)
        if regex is not None:
            value = self.from_class_path(regex)
            if value:
                return value

            value = self.from_input_arguments(regex)
            if value:
                return value

        value = self.from_config_source(property_key)
        if value:
            return value

        logger.debug(f"ConfigProbe: no value found for {property_key}")
        return None

    def from_properties(self, property_key: str) -> Optional[str]:
        return self.context.get_property(property_key) or None

    def from_class_path(self, regex: re.Pattern) -> Optional[str]:
        return _first_non_empty(extract_by_regex(self.context.class_path, regex))

    def from_input_arguments(self, regex: re.Pattern) -> Optional[str]:
        for entry in self.context.input_arguments:
            value = _first_non_empty(extract_by_regex(entry, regex))
            if value:
                return value
        return None

    def from_config_source(self, property_key: str) -> Optional[str]:
        try:
            return self.config_source.get(property_key) or None
        except Exception:
            logger.debug(f"ConfigProbe: config source failed for {property_key}", exc_info=True)
            return None

    @staticmethod
    def _compile(pattern: PatternType) -> Optional[re.Pattern]:
        if pattern is None:
            return None
        if not isinstance(pattern, str):
            return pattern
        try:
            return re.compile(pattern)
        except re.error:
            logger.debug(f"ConfigProbe: invalid pattern {pattern}", exc_info=True)
            return None


def probe_app_id(
    context: Optional[ProcessContext] = None,
    pattern: PatternType = DEFAULT_APP_ID_REGEX,
    config_source: Optional[ReflectiveConfigSource] = None,
) -> Optional[str]:
    """Resolves the application id of the process described by <context>"""
    if context is None:
        context = ProcessContext.current()
    return ConfigProbe(context, config_source).resolve(pattern, APP_ID_KEY)


def probe_app_name(
    context: Optional[ProcessContext] = None,
    pattern: PatternType = None,
    config_source: Optional[ReflectiveConfigSource] = None,
) -> Optional[str]:
    """Resolves the application name of the process described by <context>"""
    if context is None:
        context = ProcessContext.current()
    return ConfigProbe(context, config_source).resolve(pattern, APP_NAME_KEY)
