# (c) Copyright IBM Corp. 2025

"""
This module provides "python -m sparkprobe" functionality.  It prints the
identity of a process as JSON, which helps diagnosing what a profiler will
tag its metrics with.

    python -m sparkprobe [PID]
"""
import json
import sys

from sparkprobe.context import ProcessContext
from sparkprobe.identity import probe_identity

USAGE = "Usage: python -m sparkprobe [PID]"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    if args:
        try:
            pid = int(args[0])
        except ValueError:
            pid = -1
        if pid < 0:
            print(USAGE, file=sys.stderr)
            return 2
        context = ProcessContext.from_pid(pid)
    else:
        context = ProcessContext.current()

    identity = probe_identity(context)
    print(json.dumps(identity.to_dict(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
