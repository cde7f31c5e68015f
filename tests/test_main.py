# (c) Copyright IBM Corp. 2025

import json
from typing import TYPE_CHECKING, List

import pytest

from sparkprobe.__main__ import USAGE, main
from sparkprobe.config_source import NullConfigSource
from sparkprobe.context import ProcessContext
from tests.helpers import APP_ID

if TYPE_CHECKING:
    from pytest import CaptureFixture
    from pytest_mock import MockerFixture


class TestMain:
    @pytest.fixture(autouse=True)
    def _resource(self, mocker: "MockerFixture") -> None:
        mocker.patch("sparkprobe.config_source.default_config_source", return_value=NullConfigSource())

    def test_main_with_pid(
        self, mocker: "MockerFixture", capsys: "CaptureFixture", executor_argv: List[str]
    ) -> None:
        from_pid = mocker.patch(
            "sparkprobe.__main__.ProcessContext.from_pid",
            return_value=ProcessContext.from_cmdline(executor_argv, pid=4242),
        )

        assert main(["4242"]) == 0

        from_pid.assert_called_once_with(4242)
        output = json.loads(capsys.readouterr().out)
        assert output["appId"] == APP_ID
        assert output["role"] == "executor"
        assert output["pid"] == 4242

    def test_main_current_process(self, mocker: "MockerFixture", capsys: "CaptureFixture") -> None:
        mocker.patch(
            "sparkprobe.__main__.ProcessContext.current",
            return_value=ProcessContext(command_line="python", pid=1),
        )

        assert main([]) == 0
        assert json.loads(capsys.readouterr().out)["role"] == "unknown"

    @pytest.mark.parametrize(
        "argv",
        [["abc"], ["1", "2"], ["-1"], ["²"]],
        ids=["not_a_number", "too_many", "negative", "superscript_digit"],
    )
    def test_main_usage(self, argv: List[str], capsys: "CaptureFixture") -> None:
        assert main(argv) == 2
        assert USAGE in capsys.readouterr().err
