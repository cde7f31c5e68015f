# (c) Copyright IBM Corp. 2025

from dataclasses import dataclass
from typing import Dict, Optional

from sparkprobe.context import JAVA_COMMAND_PROPERTY, ProcessContext
from sparkprobe.util.strings import get_argument_value

APP_JAR_FLAG = "--jar"
APP_CLASS_FLAG = "--class"


@dataclass(frozen=True)
class CommandInfo:
    app_jar: Optional[str] = None  # path of the submitted artifact
    app_class: Optional[str] = None  # entry point class

    def to_dict(self) -> Dict[str, Optional[str]]:
        kvs = dict()
        kvs["appJar"] = self.app_jar
        kvs["appClass"] = self.app_class
        return kvs


class CommandInfoExtractor(object):
    def __init__(self, context: ProcessContext) -> None:
        self.context = context

    def extract(self) -> Optional[CommandInfo]:
        """
        Parses the launch command of the process.  The command property is
        the only source, when it is missing there is nothing to parse.

        @return: CommandInfo or None
        """
        cmd = self.context.get_property(JAVA_COMMAND_PROPERTY)
        if not cmd:
            return None

        return CommandInfo(
            app_jar=get_argument_value(cmd, APP_JAR_FLAG),
            app_class=get_argument_value(cmd, APP_CLASS_FLAG),
        )


def probe_cmd_info(context: Optional[ProcessContext] = None) -> Optional[CommandInfo]:
    if context is None:
        context = ProcessContext.current()
    return CommandInfoExtractor(context).extract()
