# (c) Copyright IBM Corp. 2025

from enum import Enum
from typing import Optional, Sequence

from sparkprobe.context import ProcessContext
from sparkprobe.options import DEFAULT_COORDINATOR_KEYWORDS, DEFAULT_WORKER_KEYWORDS


class ProcessRole(Enum):
    COORDINATOR = "driver"
    WORKER = "executor"
    UNKNOWN = "unknown"


class RoleKeywordMatchers(object):
    """Keyword predicates telling worker and coordinator launch commands apart"""

    def __init__(
        self,
        worker_keywords: Optional[Sequence[str]] = None,
        coordinator_keywords: Optional[Sequence[str]] = None,
    ) -> None:
        self.worker_keywords = list(
            worker_keywords if worker_keywords is not None else DEFAULT_WORKER_KEYWORDS
        )
        self.coordinator_keywords = list(
            coordinator_keywords if coordinator_keywords is not None else DEFAULT_COORDINATOR_KEYWORDS
        )

    def looks_like_worker(self, text: str) -> bool:
        return any(keyword in text for keyword in self.worker_keywords)

    def looks_like_coordinator(self, text: str) -> bool:
        return any(keyword in text for keyword in self.coordinator_keywords)


class RoleClassifier(object):
    def __init__(self, matchers: Optional[RoleKeywordMatchers] = None) -> None:
        self.matchers = matchers if matchers is not None else RoleKeywordMatchers()

    def classify(self, raw_command_line: Optional[str]) -> ProcessRole:
        # Worker is checked first
        if not raw_command_line:
            return ProcessRole.UNKNOWN
        if self.matchers.looks_like_worker(raw_command_line):
            return ProcessRole.WORKER
        if self.matchers.looks_like_coordinator(raw_command_line):
            return ProcessRole.COORDINATOR
        return ProcessRole.UNKNOWN


def probe_role(
    context: Optional[ProcessContext] = None,
    matchers: Optional[RoleKeywordMatchers] = None,
) -> ProcessRole:
    if context is None:
        context = ProcessContext.current()
    return RoleClassifier(matchers).classify(context.command_line)
