# (c) Copyright IBM Corp. 2025

"""
Read-only view of the process being probed.

A ProcessContext bundles everything the probes read from the outside world:
the system property store, the classpath, the JVM input arguments, the raw
command line and the environment.  Probes never touch global process state
directly so a context can be built from a live pid or from fixtures.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Union

from sparkprobe.log import logger
from sparkprobe.util.runtime import get_proc_cmdline, get_proc_environ

CLASS_PATH_PROPERTY = "java.class.path"
JAVA_COMMAND_PROPERTY = "sun.java.command"

CLASS_PATH_OPTIONS = ("-cp", "-classpath", "--class-path")

# Launcher options taking their value as the next argument
VALUE_OPTIONS = (
    "-p",
    "--module-path",
    "--upgrade-module-path",
    "--add-modules",
    "--add-exports",
    "--add-opens",
    "--add-reads",
    "--limit-modules",
)

MODULE_OPTIONS = ("-m", "--module")


@dataclass(frozen=True)
class ProcessContext:
    properties: Mapping[str, str] = field(default_factory=dict)
    class_path: str = ""
    input_arguments: Sequence[str] = field(default_factory=list)
    command_line: str = ""
    environment: Mapping[str, str] = field(default_factory=dict)
    pid: Optional[int] = None

    def get_property(self, key: str) -> Optional[str]:
        return self.properties.get(key)

    @classmethod
    def from_cmdline(
        cls,
        argv: Sequence[str],
        environment: Optional[Mapping[str, str]] = None,
        pid: Optional[int] = None,
    ) -> "ProcessContext":
        """
        Builds a context from the argv of a JVM launch.

        java [options] <mainclass> [args...]
        java [options] -jar <jarfile> [args...]
        java [options] -m <module>[/<mainclass>] [args...]

        @param argv: the full argv, executable first
        @param environment: environment of the launched process
        @param pid: the process id, when known
        @return: ProcessContext
        """
        environment = dict(environment or {})
        argv = list(argv)

        properties: Dict[str, str] = {}
        input_arguments: List[str] = []
        class_path = None
        main = None
        app_args: List[str] = []

        idx = 1
        while idx < len(argv):
            arg = argv[idx]
            if arg in CLASS_PATH_OPTIONS:
                if idx + 1 < len(argv):
                    class_path = argv[idx + 1]
                idx += 2
                continue
            if arg.startswith("--class-path="):
                class_path = arg[len("--class-path="):]
            elif arg in VALUE_OPTIONS:
                if idx + 1 < len(argv):
                    input_arguments.append(f"{arg}={argv[idx + 1]}")
                idx += 2
                continue
            elif arg == "-jar" or arg in MODULE_OPTIONS:
                if idx + 1 < len(argv):
                    main = argv[idx + 1]
                    if arg == "-jar":
                        class_path = main
                app_args = argv[idx + 2:]
                break
            elif arg.startswith("-"):
                input_arguments.append(arg)
                if arg.startswith("-D"):
                    key, _, value = arg[2:].partition("=")
                    if key:
                        properties[key] = value
            else:
                main = arg
                app_args = argv[idx + 1:]
                break
            idx += 1

        if class_path is None:
            class_path = environment.get("CLASSPATH") or "."
        properties.setdefault(CLASS_PATH_PROPERTY, class_path)

        if main is not None:
            properties.setdefault(JAVA_COMMAND_PROPERTY, " ".join([main] + list(app_args)))

        return cls(
            properties=properties,
            class_path=class_path,
            input_arguments=input_arguments,
            command_line=" ".join(argv),
            environment=environment,
            pid=pid,
        )

    @classmethod
    def from_pid(cls, pid: Union[int, str]) -> "ProcessContext":
        """
        Builds a context for a running process by reading its procfs entries.
        Unreadable entries yield an empty context rather than an error.
        """
        argv = get_proc_cmdline(pid)
        environment = get_proc_environ(pid)
        if not argv:
            logger.debug(f"ProcessContext.from_pid: no command line for pid {pid}")

        try:
            numeric_pid = os.getpid() if pid == "self" else int(pid)
        except ValueError:
            numeric_pid = None

        return cls.from_cmdline(argv, environment, numeric_pid)

    @classmethod
    def current(cls) -> "ProcessContext":
        return cls.from_pid("self")
