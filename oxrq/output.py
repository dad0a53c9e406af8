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

from dataclasses import dataclass
from typing import BinaryIO, Optional

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from .prefixes import PrefixMapping
from .query import ENGINE_ERRORS, QueryResult
from .rdf import Dataset, DefaultGraph, GraphName
from .rdf.formats import Format, resolve_output_format, results_format
from .rdf.formats import supports_dataset, supports_prefixes
from .utils import IoFailure, QueryFailure, log, pretty_log

#===============================================================================

STDOUT_NAME = '<stdout>'

#===============================================================================

@dataclass(frozen=True)
class OutputTarget:
    format: Format
    dataset: Optional[Dataset] = None
    graph_name: Optional[GraphName] = None      # None means the whole dataset
    results: Optional[oxigraph.QuerySolutions | oxigraph.QueryBoolean] = None

#===============================================================================

def resolve_output(result: QueryResult, requested_format: Optional[str]=None) -> OutputTarget:
#=============================================================================================
    """
    Decide what to serialize and how.

    SELECT and ASK results go out as a query results table. Otherwise a
    format able to hold named graphs gets the whole dataset. A single graph
    format gets the default graph if it has any triples, else the first
    non-empty named graph in load order, else an empty document.
    """
    if result.kind.tabular:
        format = resolve_output_format(requested_format, True)
        return OutputTarget(format, results=result.results)

    format = resolve_output_format(requested_format, False)
    dataset = result.dataset
    assert dataset is not None
    if supports_dataset(format):
        return OutputTarget(format, dataset=dataset)
    if not dataset.default_graph_empty():
        return OutputTarget(format, dataset=dataset, graph_name=DefaultGraph())
    populated = dataset.populated_graphs()
    if len(populated) == 0:
        return OutputTarget(format, dataset=dataset, graph_name=DefaultGraph())
    if len(populated) > 1:
        log.warning(f'{format.value} holds a single graph, only outputting {pretty_log(populated[0])}')
    return OutputTarget(format, dataset=dataset, graph_name=populated[0])

#===============================================================================

def serialize(target: OutputTarget, prefixes: Optional[PrefixMapping]=None) -> bytes:
#====================================================================================
    if target.results is not None:
        try:
            return target.results.serialize(format=results_format(target.format))    # type: ignore
        except ENGINE_ERRORS as e:
            raise QueryFailure(f'Query failed: {e}')
    assert target.dataset is not None
    hints = dict(prefixes) if prefixes and supports_prefixes(target.format) else None
    try:
        return target.dataset.dump(target.format, target.graph_name, prefixes=hints)
    except ENGINE_ERRORS as e:
        raise IoFailure(f'Unable to serialize as {target.format.value}: {e}', STDOUT_NAME)

def write_output(data: bytes, stream: BinaryIO):
#===============================================
    try:
        stream.write(data)
        stream.flush()
    except OSError as e:
        raise IoFailure(f'Unable to write output: {e}', STDOUT_NAME)

#===============================================================================
#===============================================================================
