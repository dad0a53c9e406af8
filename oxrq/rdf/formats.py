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

from enum import Enum
from pathlib import Path
from typing import Optional

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..utils import UnknownFormat

#===============================================================================

class Format(Enum):
    TURTLE = 'turtle'
    TRIG = 'trig'
    N_TRIPLES = 'ntriples'
    N_QUADS = 'nquads'
    N3 = 'n3'
    RDF_XML = 'rdfxml'
    # Query results, output only
    CSV = 'csv'
    TSV = 'tsv'
    JSON = 'json'
    XML = 'xml'

#===============================================================================

DEFAULT_INPUT_FORMAT = Format.TRIG
DEFAULT_GRAPH_OUTPUT_FORMAT = Format.TRIG
DEFAULT_TABULAR_OUTPUT_FORMAT = Format.TSV

QUERY_FILE_SUFFIX = 'rq'

#===============================================================================

# File suffixes, format names and media types

RDF_FORMAT_NAMES: dict[str, Format] = {
    'ttl': Format.TURTLE,
    'turtle': Format.TURTLE,
    'text/turtle': Format.TURTLE,
    'trig': Format.TRIG,
    'application/trig': Format.TRIG,
    'nt': Format.N_TRIPLES,
    'ntriples': Format.N_TRIPLES,
    'application/n-triples': Format.N_TRIPLES,
    'nq': Format.N_QUADS,
    'nquads': Format.N_QUADS,
    'application/n-quads': Format.N_QUADS,
    'n3': Format.N3,
    'text/n3': Format.N3,
    'rdf': Format.RDF_XML,
    'xml': Format.RDF_XML,
    'rdfxml': Format.RDF_XML,
    'owl': Format.RDF_XML,
    'application/rdf+xml': Format.RDF_XML,
}

RESULTS_FORMAT_NAMES: dict[str, Format] = {
    'csv': Format.CSV,
    'text/csv': Format.CSV,
    'tsv': Format.TSV,
    'text/tab-separated-values': Format.TSV,
    'json': Format.JSON,
    'srj': Format.JSON,
    'application/sparql-results+json': Format.JSON,
    'xml': Format.XML,
    'srx': Format.XML,
    'application/sparql-results+xml': Format.XML,
}

#===============================================================================

def suffix_token(path: str) -> Optional[str]:
#============================================
    suffix = Path(path).suffix
    return suffix[1:].lower() if suffix else None

def _lookup(name: str, table: dict[str, Format], kind: str) -> Format:
    format = table.get(name.strip().lower())
    if format is None:
        raise UnknownFormat(f'Unknown {kind} format: {name}')
    return format

def resolve_format(explicit: Optional[str], suffix: Optional[str]) -> Format:
#===========================================================================
    """
    Resolve the RDF syntax of an input source.

    An explicit format name always wins, otherwise the file's suffix
    is looked up. A source with neither (i.e. stdin) defaults to TriG,
    which also accepts Turtle.
    """
    if explicit is not None:
        return _lookup(explicit, RDF_FORMAT_NAMES, 'input')
    if suffix is not None:
        format = RDF_FORMAT_NAMES.get(suffix.lower())
        if format is None:
            raise UnknownFormat(f'No RDF format found for extension {suffix}')
        return format
    return DEFAULT_INPUT_FORMAT

def resolve_output_format(explicit: Optional[str], tabular: bool) -> Format:
#==========================================================================
    if tabular:
        if explicit is None:
            return DEFAULT_TABULAR_OUTPUT_FORMAT
        return _lookup(explicit, RESULTS_FORMAT_NAMES, 'query results')
    elif explicit is None:
        return DEFAULT_GRAPH_OUTPUT_FORMAT
    return _lookup(explicit, RDF_FORMAT_NAMES, 'output')

def check_output_format(explicit: Optional[str]):
#================================================
    if explicit is not None:
        name = explicit.strip().lower()
        if name not in RDF_FORMAT_NAMES and name not in RESULTS_FORMAT_NAMES:
            raise UnknownFormat(f'Unknown output format: {explicit}')

#===============================================================================

def supports_dataset(format: Format) -> bool:
#============================================
    match format:
        case Format.TRIG | Format.N_QUADS:
            return True
        case Format.TURTLE | Format.N_TRIPLES | Format.N3 | Format.RDF_XML:
            return False
        case Format.CSV | Format.TSV | Format.JSON | Format.XML:
            return False

def supports_prefixes(format: Format) -> bool:
#=============================================
    match format:
        case Format.TURTLE | Format.TRIG | Format.N3:
            return True
        case Format.N_TRIPLES | Format.N_QUADS | Format.RDF_XML:
            return False
        case Format.CSV | Format.TSV | Format.JSON | Format.XML:
            return False

def is_tabular(format: Format) -> bool:
#======================================
    match format:
        case Format.CSV | Format.TSV | Format.JSON | Format.XML:
            return True
        case Format.TURTLE | Format.TRIG | Format.N_TRIPLES | Format.N_QUADS | Format.N3 | Format.RDF_XML:
            return False

#===============================================================================

def rdf_format(format: Format) -> oxigraph.RdfFormat:
#====================================================
    match format:
        case Format.TURTLE:
            return oxigraph.RdfFormat.TURTLE
        case Format.TRIG:
            return oxigraph.RdfFormat.TRIG
        case Format.N_TRIPLES:
            return oxigraph.RdfFormat.N_TRIPLES
        case Format.N_QUADS:
            return oxigraph.RdfFormat.N_QUADS
        case Format.N3:
            return oxigraph.RdfFormat.N3
        case Format.RDF_XML:
            return oxigraph.RdfFormat.RDF_XML
        case Format.CSV | Format.TSV | Format.JSON | Format.XML:
            raise UnknownFormat(f'{format.value} is a query results format, not an RDF format')

def results_format(format: Format) -> oxigraph.QueryResultsFormat:
#=================================================================
    match format:
        case Format.CSV:
            return oxigraph.QueryResultsFormat.CSV
        case Format.TSV:
            return oxigraph.QueryResultsFormat.TSV
        case Format.JSON:
            return oxigraph.QueryResultsFormat.JSON
        case Format.XML:
            return oxigraph.QueryResultsFormat.XML
        case Format.TURTLE | Format.TRIG | Format.N_TRIPLES | Format.N_QUADS | Format.N3 | Format.RDF_XML:
            raise UnknownFormat(f'{format.value} is an RDF format, not a query results format')

#===============================================================================
#===============================================================================
