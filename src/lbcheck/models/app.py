# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application configuration models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Application:
    """
    One balanced application: a display name, the ports it listens on and
    its backend targets. Targets are carried for reporting only.
    """

    name: str
    ports: tuple[int, ...] = ()
    targets: tuple[str, ...] = ()


@dataclass(frozen=True)
class AppConfig:
    apps: tuple[Application, ...] = field(default_factory=tuple)
