# (c) Copyright IBM Corp. 2025

import os
import sys
import types
from typing import Any, Dict, Generator, List, Optional

import pytest

from sparkprobe.context import ProcessContext
from tests.helpers import APP_ID, CONTAINER_DIR


@pytest.fixture
def executor_argv() -> List[str]:
    return [
        "/usr/lib/jvm/java-11/bin/java",
        "-server",
        "-Xmx4g",
        f"-Djava.io.tmpdir={CONTAINER_DIR}/tmp",
        "-Dspark.driver.port=35555",
        "-cp",
        f"{CONTAINER_DIR}/__spark_conf__:{CONTAINER_DIR}/__app__.jar:/usr/lib/spark/jars/*",
        "org.apache.spark.executor.YarnCoarseGrainedExecutorBackend",
        "--driver-url",
        "spark://CoarseGrainedScheduler@10.0.0.1:35555",
        "--executor-id",
        "1",
        "--app-id",
        APP_ID,
    ]


@pytest.fixture
def driver_argv() -> List[str]:
    return [
        "/usr/lib/jvm/java-11/bin/java",
        "-server",
        "-Xmx2g",
        "-Dspark.yarn.app.container.log.dir=/var/log/hadoop-yarn/containers",
        "-cp",
        "/usr/lib/spark/jars/*",
        "org.apache.spark.deploy.yarn.ApplicationMaster",
        "--class",
        "com.example.Main",
        "--jar",
        "/path/to/app.jar",
        "--properties-file",
        "/tmp/__spark_conf__.properties",
    ]


@pytest.fixture
def executor_context(executor_argv: List[str]) -> ProcessContext:
    return ProcessContext.from_cmdline(executor_argv, pid=4242)


@pytest.fixture
def driver_context(driver_argv: List[str]) -> ProcessContext:
    return ProcessContext.from_cmdline(driver_argv, pid=4243)


class FakeSparkConf:
    def __init__(self, settings: Dict[str, str]) -> None:
        self.settings = settings

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.settings.get(key, default)


class FakeSparkContext:
    _active_spark_context = None

    def __init__(self, settings: Dict[str, str]) -> None:
        self.conf = FakeSparkConf(settings)

    def getConf(self) -> FakeSparkConf:
        return self.conf


class FakeSparkSession:
    active = None

    def __init__(self, settings: Dict[str, str]) -> None:
        self.conf = FakeSparkConf(settings)

    @classmethod
    def getActiveSession(cls) -> Any:
        return cls.active


@pytest.fixture
def pyspark_host(monkeypatch: pytest.MonkeyPatch) -> Generator[types.SimpleNamespace, None, None]:
    """
    Simulates a host that has loaded pyspark in this interpreter.  Tests
    activate a context or a session by setting it on the returned namespace.
    """
    context_module = types.ModuleType("pyspark.context")
    context_module.SparkContext = type("SparkContext", (FakeSparkContext,), {})
    session_module = types.ModuleType("pyspark.sql.session")
    session_module.SparkSession = type("SparkSession", (FakeSparkSession,), {})

    monkeypatch.setitem(sys.modules, "pyspark", types.ModuleType("pyspark"))
    monkeypatch.setitem(sys.modules, "pyspark.context", context_module)
    monkeypatch.setitem(sys.modules, "pyspark.sql", types.ModuleType("pyspark.sql"))
    monkeypatch.setitem(sys.modules, "pyspark.sql.session", session_module)

    yield types.SimpleNamespace(
        SparkContext=context_module.SparkContext,
        SparkSession=session_module.SparkSession,
    )


@pytest.fixture(autouse=True)
def _clean_sparkprobe_env() -> Generator[None, None, None]:
    yield
    for key in list(os.environ):
        if key.startswith("SPARKPROBE_"):
            os.environ.pop(key)
