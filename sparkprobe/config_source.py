# (c) Copyright IBM Corp. 2025

"""
Sources reading the live configuration object of a host framework running in
this interpreter.

The host framework's internals shift between versions, so each supported
shape gets its own source and an unsupported or absent host is just another
source that never answers.  Sources never raise: a failed lookup is None.

The description and hierarchy of the classes in this file are as follows:

ReflectiveConfigSource - base class, answers None for every key
  - NullConfigSource - used when no host framework is loaded
  - AccessorChainConfigSource - reaches a config object through a static accessor chain
    - SparkSessionConfigSource - pyspark.sql SparkSession.getActiveSession().conf
    - SparkContextConfigSource - pyspark SparkContext._active_spark_context.getConf()
  - FirstAvailableConfigSource - asks several sources in order
"""

import os
import sys
from typing import Any, Optional, Sequence

from sparkprobe.log import logger
from sparkprobe.util.reflection import invoke_method, invoke_static_accessor_chain


class ReflectiveConfigSource(object):
    """Base class for all live configuration sources"""

    def get(self, key: str) -> Optional[str]:
        return None


class NullConfigSource(ReflectiveConfigSource):
    pass


class AccessorChainConfigSource(ReflectiveConfigSource):
    """
    Re-acquires the host configuration object on every lookup by walking
    <method_chain> from <class_name>, then calls its get(key) accessor.
    """

    def __init__(self, class_name: str, method_chain: str, getter: str = "get") -> None:
        self.class_name = class_name
        self.method_chain = method_chain
        self.getter = getter

    def get_config_object(self) -> Optional[Any]:
        try:
            return invoke_static_accessor_chain(self.class_name, self.method_chain)
        except Exception:
            logger.debug(
                f"{type(self).__name__}: can't reach {self.class_name}.{self.method_chain}",
                exc_info=True,
            )
            return None

    def get(self, key: str) -> Optional[str]:
        conf = self.get_config_object()
        if conf is None:
            return None

        try:
            value = invoke_method(conf, self.getter, key)
        except Exception:
            logger.debug(f"{type(self).__name__}: lookup of {key} failed", exc_info=True)
            return None

        if value is None:
            return None
        value = str(value)
        return value if value else None


class SparkSessionConfigSource(AccessorChainConfigSource):
    def __init__(self) -> None:
        super().__init__("pyspark.sql.session.SparkSession", "getActiveSession().conf")


class SparkContextConfigSource(AccessorChainConfigSource):
    def __init__(self) -> None:
        super().__init__("pyspark.context.SparkContext", "_active_spark_context.getConf()")


class FirstAvailableConfigSource(ReflectiveConfigSource):
    def __init__(self, sources: Sequence[ReflectiveConfigSource]) -> None:
        self.sources = list(sources)

    def get(self, key: str) -> Optional[str]:
        for source in self.sources:
            value = source.get(key)
            if value:
                return value
        return None


def default_config_source() -> ReflectiveConfigSource:
    """
    Picks the live config source for this interpreter.  When pyspark has not
    been loaded by the host there is no live configuration to read.
    """
    if "pyspark" not in sys.modules:
        return NullConfigSource()

    return FirstAvailableConfigSource([SparkSessionConfigSource(), SparkContextConfigSource()])


def config_source_for(pid: Optional[int]) -> ReflectiveConfigSource:
    """
    Picks the live config source for the process <pid>.  The live
    configuration belongs to this interpreter, an attaching agent probing
    another process can't read it.

    @param pid: the probed process id, None for this process
    @return: ReflectiveConfigSource
    """
    if pid is not None and pid != os.getpid():
        logger.debug(f"config_source_for: pid {pid} is another process, no live configuration")
        return NullConfigSource()

    return default_config_source()
