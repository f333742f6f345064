# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level lbcheck facade wiring settings, connector and validators."""

from __future__ import annotations

from .config import ProbeSettings, load_app_config, load_probe_settings
from .models import AppConfig, Application, ApplicationReport, PortVerdict, RunReport
from .probe.connector import Connector, create_default_connector
from .scan.port import PortValidator
from .scan.runner import ApplicationValidator, ValidationRunner
from .utils.context import ProbeContext


class LbCheck:
    """
    Convenience wrapper that shares one connector across port, application and run validation.
    """

    def __init__(self, connector: Connector | None = None, settings: ProbeSettings | None = None):
        self.settings = settings or load_probe_settings()
        self.connector = connector or create_default_connector(self.settings)
        self.port_validator = PortValidator(self.connector)
        self.app_validator = ApplicationValidator(self.port_validator)
        self.runner = ValidationRunner(self.app_validator)

    def validate_port(self, port: int, *, app: str | None = None) -> PortVerdict:
        return self.port_validator.validate(port, ProbeContext(app=app))

    def validate_app(self, app: Application) -> ApplicationReport:
        return self.app_validator.validate(app)

    def run(self, config: AppConfig | str) -> RunReport:
        if isinstance(config, str):
            config = load_app_config(config)
        return self.runner.run(config)
