# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
lbcheck package entrypoint.

Validates that a TCP load balancer in front of echo backends relays data
correctly: single short, long and binary frames over one connection, then a
concurrent and a sequential burst of fresh connections per port. Dialing is
abstracted behind an injectable connector, and results are modeled with typed
dataclasses.
"""

from .config import ProbeSettings, load_app_config, load_probe_settings
from .errors import ConfigError, ErrorCategory, InvalidArgument
from .log import setup_logging
from .models import (
    AppConfig,
    Application,
    ApplicationReport,
    BatchPattern,
    BatchResult,
    PortCheck,
    PortVerdict,
    ProbeOutcome,
    RunReport,
)
from .probe import (
    Connector,
    TcpConnector,
    create_default_connector,
    generate_binary,
    generate_text,
    probe,
    run_concurrent_batch,
    run_sequential_batch,
)
from .runtime import LbCheck
from .scan import ApplicationValidator, PortValidator, ValidationRunner
from .utils.context import ProbeContext
from .version import __version__

__all__ = [
    "AppConfig",
    "Application",
    "ApplicationReport",
    "ApplicationValidator",
    "BatchPattern",
    "BatchResult",
    "ConfigError",
    "Connector",
    "ErrorCategory",
    "InvalidArgument",
    "LbCheck",
    "PortCheck",
    "PortValidator",
    "PortVerdict",
    "ProbeContext",
    "ProbeOutcome",
    "ProbeSettings",
    "RunReport",
    "TcpConnector",
    "ValidationRunner",
    "__version__",
    "create_default_connector",
    "generate_binary",
    "generate_text",
    "load_app_config",
    "load_probe_settings",
    "probe",
    "run_concurrent_batch",
    "run_sequential_batch",
    "setup_logging",
]
