# (c) Copyright IBM Corp. 2025

"""
Options for the identity probes.

The priority is as follows:
environment variables > configuration file (SPARKPROBE_CONFIG_PATH) > default value

Configuration file format:

probe:
  app-id-regex: "application_[\\w_]+"
  app-name-regex: "--name\\s+(\\S+)"
  app-id-variable: "SPARK_APPLICATION_ID"
  worker-keywords:
    - org.apache.spark.executor.CoarseGrainedExecutorBackend
  coordinator-keywords:
    - org.apache.spark.deploy.yarn.ApplicationMaster
"""

import logging
import os
import re
from typing import Any, Dict, List, Optional

from sparkprobe.log import logger
from sparkprobe.util.config_reader import read_config_section

DEFAULT_APP_ID_REGEX = r"application_[\w_]+"

DEFAULT_WORKER_KEYWORDS = [
    "org.apache.spark.executor.CoarseGrainedExecutorBackend",
    "org.apache.spark.executor.YarnCoarseGrainedExecutorBackend",
]

DEFAULT_COORDINATOR_KEYWORDS = [
    "org.apache.spark.deploy.yarn.ApplicationMaster",
    "org.apache.spark.deploy.SparkSubmit",
]


def parse_keywords(value: Any) -> List[str]:
    """
    Accepts either a comma separated string or a list of strings.

    @return: list of non-empty keywords
    """
    if isinstance(value, str):
        return [kw.strip() for kw in value.split(",") if kw.strip()]
    if isinstance(value, list):
        return [str(kw).strip() for kw in value if kw is not None and str(kw).strip()]
    return []


def validate_regex(value: Any, context: str = "") -> Optional[str]:
    """
    Validates a configured regular expression.

    @return: the expression, or None if it doesn't compile
    """
    if not value:
        return None
    try:
        re.compile(str(value))
        return str(value)
    except re.error as e:
        context_msg = f" {context}" if context else ""
        logger.warning(f"Invalid regular expression{context_msg}: {value} ({e}). Ignoring it.")
        return None


class ProbeOptions(object):
    """Options used to resolve the identity of a process"""

    def __init__(self, **kwds: Dict[str, Any]) -> None:
        self.debug = False
        self.log_level = logging.WARN
        self.app_id_regex = DEFAULT_APP_ID_REGEX
        self.app_name_regex = None
        self.app_id_variable = None
        self.worker_keywords = list(DEFAULT_WORKER_KEYWORDS)
        self.coordinator_keywords = list(DEFAULT_COORDINATOR_KEYWORDS)

        self.set_from_yaml(os.environ.get("SPARKPROBE_CONFIG_PATH", ""))
        self.set_from_env()

        self.__dict__.update(kwds)

    def set_from_yaml(self, file_path: str) -> None:
        if not file_path:
            return

        probe_config = read_config_section(file_path, "probe")
        if not probe_config:
            return

        if regex := validate_regex(probe_config.get("app-id-regex"), "for app-id-regex"):
            self.app_id_regex = regex
        if regex := validate_regex(probe_config.get("app-name-regex"), "for app-name-regex"):
            self.app_name_regex = regex
        if probe_config.get("app-id-variable"):
            self.app_id_variable = str(probe_config["app-id-variable"])
        if keywords := parse_keywords(probe_config.get("worker-keywords")):
            self.worker_keywords = keywords
        if keywords := parse_keywords(probe_config.get("coordinator-keywords")):
            self.coordinator_keywords = keywords

    def set_from_env(self) -> None:
        if "SPARKPROBE_DEBUG" in os.environ:
            self.log_level = logging.DEBUG
            self.debug = True

        if regex := validate_regex(
            os.environ.get("SPARKPROBE_APP_ID_REGEX"), "in SPARKPROBE_APP_ID_REGEX"
        ):
            self.app_id_regex = regex

        if regex := validate_regex(
            os.environ.get("SPARKPROBE_APP_NAME_REGEX"), "in SPARKPROBE_APP_NAME_REGEX"
        ):
            self.app_name_regex = regex

        if os.environ.get("SPARKPROBE_APP_ID_VARIABLE"):
            self.app_id_variable = os.environ["SPARKPROBE_APP_ID_VARIABLE"]

        if keywords := parse_keywords(os.environ.get("SPARKPROBE_WORKER_KEYWORDS")):
            self.worker_keywords = keywords

        if keywords := parse_keywords(os.environ.get("SPARKPROBE_COORDINATOR_KEYWORDS")):
            self.coordinator_keywords = keywords

    def update_log_level(self) -> None:
        """Uses the value in <self.log_level> to update the package logger"""
        if self.log_level not in [logging.DEBUG, logging.INFO, logging.WARN, logging.ERROR]:
            logger.warning(f"ProbeOptions.update_log_level: Unknown log level set: {self.log_level}")
            return

        logger.setLevel(self.log_level)
