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
from enum import Enum
from typing import Optional

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from .prefixes import PrefixMapping
from .rdf import Dataset, Quad
from .utils import IoFailure, QueryFailure, log

#===============================================================================

ENGINE_ERRORS = (SyntaxError, ValueError, OSError, RuntimeError)

#===============================================================================

def read_query_file(path: str) -> str:
#=====================================
    try:
        with open(path, encoding='utf-8') as fp:
            return fp.read()
    except OSError as e:
        raise IoFailure(f'Unable to open query file: {path} ({e.strerror})', path)
    except UnicodeDecodeError as e:
        raise IoFailure(f'Query file {path} is not UTF-8: {e}', path)

def assemble(query_body: str, prefixes: PrefixMapping) -> str:
#=============================================================
    declarations = ''.join([
        f'PREFIX {prefix}: <{ns_uri}>\n' for prefix, ns_uri in prefixes.items()
    ])
    return f'{declarations}{query_body}'

#===============================================================================

class ResultKind(Enum):
    MUTATED_DATASET = 'update'
    CONSTRUCTED_GRAPH = 'construct'
    BINDINGS_TABLE = 'select'
    BOOLEAN = 'ask'

    @property
    def tabular(self) -> bool:
        return self in (ResultKind.BINDINGS_TABLE, ResultKind.BOOLEAN)

@dataclass(frozen=True)
class QueryResult:
    kind: ResultKind
    dataset: Optional[Dataset] = None
    results: Optional[oxigraph.QuerySolutions | oxigraph.QueryBoolean] = None

#===============================================================================

def execute(dataset: Dataset, query_text: str, base_iri: Optional[str]=None,
            query_body: Optional[str]=None) -> QueryResult:
#===========================================================================
    """
    Run SPARQL against the dataset and classify what comes back.

    The text is tried as a query first, with the union of all graphs as its
    default graph. Text that doesn't parse as a query is run as an update,
    which modifies the dataset in place. An empty query body is an update
    that does nothing, leaving the loaded data to be output.
    """
    if query_body is not None and query_body.strip() == '':
        return QueryResult(ResultKind.MUTATED_DATASET, dataset=dataset)
    try:
        results = dataset.query(query_text, base_iri=base_iri)
    except SyntaxError as query_error:
        try:
            dataset.update(query_text, base_iri=base_iri)
        except SyntaxError:
            raise QueryFailure(f'Query failed: {query_error}')
        except ENGINE_ERRORS as e:
            raise QueryFailure(f'Update failed: {e}')
        log.debug('Executed SPARQL update')
        return QueryResult(ResultKind.MUTATED_DATASET, dataset=dataset)
    except ENGINE_ERRORS as e:
        raise QueryFailure(f'Query failed: {e}')

    if isinstance(results, oxigraph.QuerySolutions):
        return QueryResult(ResultKind.BINDINGS_TABLE, results=results)
    elif isinstance(results, oxigraph.QueryBoolean):
        return QueryResult(ResultKind.BOOLEAN, results=results)
    constructed = Dataset()
    try:
        for triple in results:
            constructed.add(Quad(triple.subject, triple.predicate, triple.object))
    except ENGINE_ERRORS as e:
        raise QueryFailure(f'Query failed: {e}')
    return QueryResult(ResultKind.CONSTRUCTED_GRAPH, dataset=constructed)

#===============================================================================
#===============================================================================
