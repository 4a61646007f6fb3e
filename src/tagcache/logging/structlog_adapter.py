# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""StructlogAdapter: LoggingPort implementation using structlog.

Library modules log through ``logging.getLogger(__name__)``; this adapter
routes those records, and structlog's own, through one renderer.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO, cast

import structlog

from tagcache.core.config import Config

_STREAM_NAMES = ("stdout", "stderr")


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Reads ``tagcache.logging.level.root``, per-module levels under
    ``tagcache.logging.level.<module>``, ``tagcache.logging.format``
    (``console`` or ``json``) and ``tagcache.logging.stream``
    (``stderr`` by default, so CLI output on stdout stays clean).
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._stream_name: str = "stderr"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        level_section = dict(config.get_section("tagcache.logging.level"))
        root = level_section.pop("root", "INFO")
        self._root_level = str(config.get("tagcache.logging.level.root", root)).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        self._format = str(config.get("tagcache.logging.format", "console")).lower()
        self._stream_name = str(config.get("tagcache.logging.stream", "stderr")).lower()

        self._setup_structlog()
        self._apply_levels()

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the log level for a specific stdlib logger."""
        log_level = getattr(logging, level.upper(), logging.INFO)
        logging.getLogger(name).setLevel(log_level)

    @property
    def stream(self) -> TextIO:
        name = self._stream_name if self._stream_name in _STREAM_NAMES else "stderr"
        return cast(TextIO, getattr(sys, name))

    def _setup_structlog(self) -> None:
        log_level = getattr(logging, self._root_level, logging.INFO)

        shared: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

        renderer: structlog.types.Processor
        if self._format == "json":
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)

        structlog.configure(
            processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        # Records from plain stdlib loggers get the same processors and renderer.
        handler = logging.StreamHandler(self.stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared,
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        logging.basicConfig(handlers=[handler], level=log_level, force=True)

    def _apply_levels(self) -> None:
        for module, level in self._module_levels.items():
            self.set_level(module, level)
