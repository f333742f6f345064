# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from conftest import FakeConnector
from lbcheck.models import AppConfig, Application, PortCheck, PortVerdict
from lbcheck.scan.port import PortValidator
from lbcheck.scan.runner import ApplicationValidator, ValidationRunner


class RecordingPortValidator:
    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []

    def validate(self, port, context=None):
        self.calls.append((context.app if context else None, port))
        if port in self.failing:
            return PortVerdict(port=port, passed=False, failed_check=PortCheck.CONNECT)
        return PortVerdict(port=port, passed=True)


def test_app_without_ports_is_skipped_without_network(caplog):
    caplog.set_level(logging.INFO)
    connector = FakeConnector()
    validator = ApplicationValidator(PortValidator(connector))

    report = validator.validate(Application(name="empty", ports=()))

    assert report.skipped is True
    assert report.verdicts == []
    assert connector.calls == []
    assert "empty no ports in application configuration" in [r.getMessage() for r in caplog.records]


def test_other_apps_still_validated_next_to_empty_one():
    ports = RecordingPortValidator()
    runner = ValidationRunner(ApplicationValidator(ports))
    config = AppConfig(
        apps=(
            Application(name="a", ports=(1001, 1002)),
            Application(name="empty"),
            Application(name="b", ports=(2001,)),
        )
    )

    report = runner.run(config)

    assert ports.calls == [("a", 1001), ("a", 1002), ("b", 2001)]
    assert [app.name for app in report.applications] == ["a", "empty", "b"]
    assert report.applications[1].skipped is True


def test_failed_port_does_not_stop_next_port():
    ports = RecordingPortValidator(failing={1001})
    report = ApplicationValidator(ports).validate(Application(name="a", ports=(1001, 1002, 1003)))

    assert [v.port for v in report.verdicts] == [1001, 1002, 1003]
    assert [v.passed for v in report.verdicts] == [False, True, True]
    assert report.passed is False


def test_run_report_counts_and_summary(caplog):
    caplog.set_level(logging.INFO)
    ports = RecordingPortValidator(failing={3002})
    config = AppConfig(apps=(Application(name="c", ports=(3001, 3002, 3003)),))

    report = ValidationRunner(ApplicationValidator(ports)).run(config)

    assert report.passed_ports == 2
    assert report.failed_ports == 1
    data = report.to_dict()
    assert data["applications"][0]["ports"][1]["failed_check"] == "connect"
    assert "validated 3 port(s): 2 passed, 1 failed" in [r.getMessage() for r in caplog.records]
