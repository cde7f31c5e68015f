# (c) Copyright IBM Corp. 2025

"""
sparkprobe - identity probes for Spark processes

Determines, without cooperation from the process, the application id, the
application name and the role (driver or executor) of a Spark process so a
profiler can tag the metrics it reports.

Usage:

    from sparkprobe import ProcessContext, probe_identity

    identity = probe_identity(ProcessContext.from_pid(4242))
    tags = identity.to_dict()
"""

from .version import VERSION

__license__ = 'MIT'
__version__ = VERSION

from .cmdinfo import CommandInfo, CommandInfoExtractor, probe_cmd_info  # noqa: E402
from .config_source import (  # noqa: E402
    AccessorChainConfigSource,
    FirstAvailableConfigSource,
    NullConfigSource,
    ReflectiveConfigSource,
    SparkContextConfigSource,
    SparkSessionConfigSource,
    config_source_for,
    default_config_source,
)
from .context import ProcessContext  # noqa: E402
from .identity import ProcessIdentity, probe_identity  # noqa: E402
from .options import ProbeOptions  # noqa: E402
from .probe import (  # noqa: E402
    APP_ID,
    APP_ID_KEY,
    APP_NAME,
    APP_NAME_KEY,
    ConfigProbe,
    ProbeKey,
    probe_app_id,
    probe_app_name,
)
from .role import ProcessRole, RoleClassifier, RoleKeywordMatchers, probe_role  # noqa: E402
