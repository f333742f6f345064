# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from concurrent.futures import ThreadPoolExecutor

from lbcheck.utils.context import ProbeContext


def test_prefix_shapes():
    assert ProbeContext().prefix == ""
    assert ProbeContext(app="web").prefix == "web : "
    assert ProbeContext(app="web", port=80).prefix == "web port=80 : "
    assert ProbeContext(port=80).prefix == "port=80 : "


def test_for_port_returns_new_value():
    base = ProbeContext(app="web")
    scoped = base.for_port(443)
    assert base.port is None
    assert scoped == ProbeContext(app="web", port=443)


def test_concurrent_contexts_do_not_interfere(caplog):
    caplog.set_level(logging.INFO)

    def emit(port):
        ProbeContext(app="svc", port=port).logger.info("hello")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(emit, range(1, 33)))

    messages = sorted(r.getMessage() for r in caplog.records if r.getMessage().endswith("hello"))
    assert messages == sorted(f"svc port={port} : hello" for port in range(1, 33))
