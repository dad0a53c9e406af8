#===============================================================================
#
#  oxrq: SPARQL queries over RDF files and streams
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.dev import BRIGHT, GREEN, RESET_ALL

#===============================================================================

# Diagnostics go to stderr, leaving stdout for results

def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.processors.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    ],
    wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
    logger_factory=_stderr_logger,
    cache_logger_on_first_use=False
)

log = structlog.get_logger()

def set_log_level(level: int):
#=============================
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))

#===============================================================================

def pretty_log(s: Any) -> str:
#=============================
    return f'{RESET_ALL}{GREEN}{str(s)}{RESET_ALL}{BRIGHT}'

#===============================================================================
#===============================================================================

class Issue(Exception):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.__reason = reason

    @property
    def reason(self):
        return self.__reason

class UnknownFormat(Issue):
    """An RDF or query results format that can't be resolved."""

class IoFailure(Issue):
    def __init__(self, reason: str, path: Optional[str]=None):
        super().__init__(reason)
        self.__path = path

    @property
    def path(self) -> Optional[str]:
        return self.__path

class ParseFailure(Issue):
    def __init__(self, reason: str, source: str):
        super().__init__(reason)
        self.__source = source

    @property
    def source(self) -> str:
        return self.__source

class QueryFailure(Issue):
    """A SPARQL syntax or evaluation error reported by the query engine."""

#===============================================================================
#===============================================================================
