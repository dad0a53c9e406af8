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

from dataclasses import dataclass, field
from pathlib import Path
import sys
from typing import BinaryIO, Optional, Sequence

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from .rdf import Dataset, namedNode
from .rdf.formats import Format, QUERY_FILE_SUFFIX, rdf_format, resolve_format, suffix_token
from .utils import IoFailure, ParseFailure, UnknownFormat, log, pretty_log

#===============================================================================

STDIN_MARKER = '-'
STDIN_NAME = '<stdin>'

#===============================================================================

def graph_iri(path: str|Path) -> str:
#====================================
    return Path(path).resolve().as_uri()

#===============================================================================

@dataclass(frozen=True)
class InputSource:
    format: Format
    path: Optional[str] = None

    @property
    def is_stdin(self) -> bool:
        return self.path is None

    @property
    def name(self) -> str:
        return STDIN_NAME if self.path is None else self.path

    @property
    def graph(self) -> Optional[str]:
        """The named graph a file is loaded into; stdin uses the default graph."""
        return None if self.path is None else graph_iri(self.path)

@dataclass(frozen=True)
class Inputs:
    sources: list[InputSource] = field(default_factory=list)
    query_file: Optional[str] = None

#===============================================================================

def is_query_file(path: str) -> bool:
    return suffix_token(path) == QUERY_FILE_SUFFIX

def resolve_inputs(files: Sequence[str], input_format: Optional[str]=None,
                   no_stdin: bool=False, file_query: bool=False) -> Inputs:
#===========================================================================
    """
    Decide where data (and, in file-query mode, the query) comes from.

    Formats are resolved here so that an unknown format is reported before
    anything is read.
    """
    if input_format is not None:
        resolve_format(input_format, None)

    data_files = list(files)
    query_file = None
    if file_query:
        query_indices = [n for n, path in enumerate(files) if is_query_file(path)]
        if len(query_indices):
            query_file = data_files.pop(query_indices[-1])
            for n in query_indices[:-1]:
                log.warning(f'Only the last query file is used, {pretty_log(files[n])} will be '
                            'loaded as RDF data and will most likely fail to parse')

    sources = []
    if len(data_files) == 0:
        if not no_stdin:
            sources.append(InputSource(resolve_format(input_format, None)))
    else:
        for path in data_files:
            if path == STDIN_MARKER:
                sources.append(InputSource(resolve_format(input_format, None)))
            elif file_query and input_format is None and is_query_file(path):
                sources.append(InputSource(resolve_format(None, None), path))
            elif input_format is None and suffix_token(path) is None:
                raise UnknownFormat(f'Needs a file extension to detect the input format of {path}')
            else:
                sources.append(InputSource(resolve_format(input_format, suffix_token(path)), path))
    return Inputs(sources, query_file)

#===============================================================================

def load_inputs(sources: Sequence[InputSource], dataset: Dataset,
                base_iri: Optional[str]=None, stdin: Optional[BinaryIO]=None):
#=============================================================================
    for source in sources:
        log.debug(f'Loading {pretty_log(source.name)} as {source.format.value}')
        if source.path is None:
            _parse_into(dataset, source, stdin or sys.stdin.buffer, base_iri)
        else:
            try:
                fp = open(source.path, 'rb')
            except OSError as e:
                raise IoFailure(f'Unable to open file: {source.path} ({e.strerror})', source.path)
            with fp:
                _parse_into(dataset, source, fp, base_iri or source.graph)

def _parse_into(dataset: Dataset, source: InputSource, stream: BinaryIO, base_iri: Optional[str]):
#===================================================================================================
    try:
        parser = oxigraph.parse(stream, format=rdf_format(source.format),
                                base_iri=base_iri, rename_blank_nodes=True)
        quads = list(parser)
    except (SyntaxError, ValueError) as e:
        raise ParseFailure(f'Error in {source.name}: {e}', source.name)
    except OSError as e:
        raise IoFailure(f'Unable to read {source.name}: {e}', source.path)
    graph = source.graph
    dataset.load(source.name, quads, prefixes=parser.prefixes, base_iri=parser.base_iri,
                 graph=namedNode(graph) if graph is not None else None)

#===============================================================================
#===============================================================================
