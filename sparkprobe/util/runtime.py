# (c) Copyright IBM Corp. 2025

import os
import sys
from typing import Dict, List, Union

from sparkprobe.log import logger


def _proc_path(pid: Union[int, str], entry: str) -> str:
    return f"/proc/{pid}/{entry}"


def _split_null_separated(contents: str) -> List[str]:
    # /proc entries are strings with null bytes such as "/usr/bin/java\0-Xmx1g\0".  This
    # bit will prep the return value and drop the trailing null byte
    parts = contents.split("\0")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def get_proc_cmdline(pid: Union[int, str] = "self") -> List[str]:
    """
    Parses the command line of process <pid> from the proc file system.

    When procfs is not available and <pid> is this process, sys.argv is
    returned instead.  Otherwise an unreadable command line yields an
    empty list.

    @param pid: process id or "self"
    @return: the argv of the process
    """
    path = _proc_path(pid, "cmdline")
    if os.path.isfile(path):
        try:
            # Arguments such as paths may carry bytes that are not valid UTF-8
            with open(path, errors="replace") as cmd:
                return _split_null_separated(cmd.read())
        except OSError:
            logger.debug(f"get_proc_cmdline: can't read {path}", exc_info=True)
            return []

    if _is_self(pid):
        # Most likely not on a *nix based OS.
        return [sys.executable] + sys.argv
    logger.debug(f"get_proc_cmdline: {path} is not available")
    return []


def get_proc_environ(pid: Union[int, str] = "self") -> Dict[str, str]:
    """
    Reads the environment of process <pid> from the proc file system.

    Reading another user's process environment usually fails with a
    PermissionError, which degrades to an empty mapping.

    @param pid: process id or "self"
    @return: the environment variables of the process
    """
    path = _proc_path(pid, "environ")
    if os.path.isfile(path):
        try:
            with open(path, errors="replace") as env:
                entries = _split_null_separated(env.read())
        except OSError:
            logger.debug(f"get_proc_environ: can't read {path}", exc_info=True)
            return {}

        environment = {}
        for entry in entries:
            key, sep, value = entry.partition("=")
            if sep:
                environment[key] = value
        return environment

    if _is_self(pid):
        return dict(os.environ)
    logger.debug(f"get_proc_environ: {path} is not available")
    return {}


def _is_self(pid: Union[int, str]) -> bool:
    return pid == "self" or str(pid) == str(os.getpid())
