# (c) Copyright IBM Corp. 2025

"""
Aggregates the individual probes into the set of tags a profiler attaches to
the metrics it reports for a process.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from sparkprobe.cmdinfo import CommandInfo, CommandInfoExtractor
from sparkprobe.config_source import ReflectiveConfigSource, config_source_for
from sparkprobe.context import ProcessContext
from sparkprobe.log import logger
from sparkprobe.options import ProbeOptions
from sparkprobe.probe import APP_ID_KEY, APP_NAME_KEY, ConfigProbe
from sparkprobe.role import ProcessRole, RoleClassifier, RoleKeywordMatchers


@dataclass(frozen=True)
class ProcessIdentity:
    app_id: Optional[str] = None
    app_name: Optional[str] = None
    role: ProcessRole = ProcessRole.UNKNOWN
    cmd_info: Optional[CommandInfo] = None
    pid: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        kvs = dict()
        kvs["pid"] = self.pid
        kvs["appId"] = self.app_id
        kvs["appName"] = self.app_name
        kvs["role"] = self.role.value
        if self.cmd_info is not None:
            kvs.update(self.cmd_info.to_dict())
        return kvs


def probe_identity(
    context: Optional[ProcessContext] = None,
    options: Optional[ProbeOptions] = None,
    config_source: Optional[ReflectiveConfigSource] = None,
) -> ProcessIdentity:
    """
    Resolves the identity of the process described by <context>, this process
    by default.

    @return: ProcessIdentity
    """
    if context is None:
        context = ProcessContext.current()
    if options is None:
        options = ProbeOptions()
    options.update_log_level()
    if config_source is None:
        config_source = config_source_for(context.pid)

    probe = ConfigProbe(context, config_source)

    app_id = None
    if options.app_id_variable:
        app_id = context.environment.get(options.app_id_variable) or None
        if app_id is None:
            logger.debug(f"probe_identity: {options.app_id_variable} is not set in the process environment")
    if app_id is None:
        app_id = probe.resolve(options.app_id_regex, APP_ID_KEY)

    app_name = probe.resolve(options.app_name_regex, APP_NAME_KEY)

    matchers = RoleKeywordMatchers(options.worker_keywords, options.coordinator_keywords)
    role = RoleClassifier(matchers).classify(context.command_line)

    # Workers are launched by the framework, their command carries no user submission
    cmd_info = None
    if role != ProcessRole.WORKER:
        cmd_info = CommandInfoExtractor(context).extract()

    identity = ProcessIdentity(
        app_id=app_id,
        app_name=app_name,
        role=role,
        cmd_info=cmd_info,
        pid=context.pid,
    )
    logger.debug(f"probe_identity: {identity.to_dict()}")
    return identity
