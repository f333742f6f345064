# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Walk applications and their ports in configuration order."""

from __future__ import annotations

import logging

from ..models import AppConfig, Application, ApplicationReport, RunReport
from ..utils.context import ProbeContext
from .port import PortValidator

logger = logging.getLogger(__name__)


class ApplicationValidator:
    """Validates every configured port of one application, one port at a time."""

    def __init__(self, port_validator: PortValidator | None = None):
        self.port_validator = port_validator or PortValidator()

    def validate(self, app: Application) -> ApplicationReport:
        logger.info("%s started processing", app.name)

        report = ApplicationReport(name=app.name)
        if not app.ports:
            logger.info("%s no ports in application configuration", app.name)
            report.skipped = True
            return report

        # Ports are independent: a failed port never stops the next one.
        for port in app.ports:
            report.verdicts.append(self.port_validator.validate(port, ProbeContext(app=app.name)))
        return report


class ValidationRunner:
    """Sequentially validates all applications of a configuration."""

    def __init__(self, app_validator: ApplicationValidator | None = None):
        self.app_validator = app_validator or ApplicationValidator()

    def run(self, config: AppConfig) -> RunReport:
        report = RunReport()
        for app in config.apps:
            report.applications.append(self.app_validator.validate(app))

        logger.info(
            "validated %d port(s): %d passed, %d failed",
            report.passed_ports + report.failed_ports,
            report.passed_ports,
            report.failed_ports,
        )
        return report


__all__ = ["ApplicationValidator", "ValidationRunner"]
