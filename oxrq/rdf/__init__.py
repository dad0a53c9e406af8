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
from typing import Any, Iterable, Iterator, Optional, TypeAlias

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from .formats import Format, rdf_format

#===============================================================================

BlankNode = oxigraph.BlankNode
DefaultGraph = oxigraph.DefaultGraph
Literal = oxigraph.Literal
NamedNode = oxigraph.NamedNode
Quad = oxigraph.Quad

GraphName: TypeAlias = NamedNode | BlankNode | DefaultGraph
QueryResults: TypeAlias = oxigraph.QuerySolutions | oxigraph.QueryBoolean | oxigraph.QueryTriples

#===============================================================================

def namedNode(uri: str) -> NamedNode:
    return NamedNode(uri)

def isDefaultGraph(node: Any) -> bool:
    return isinstance(node, DefaultGraph)

#===============================================================================

@dataclass(frozen=True)
class LoadedSource:
    name: str
    prefixes: dict[str, str]
    base_iri: Optional[str]

#===============================================================================

class Dataset:
    """
    A default graph and zero or more named graphs, held in an in-memory
    ``pyoxigraph.Store``.

    Besides the quads themselves, the prefix declarations and base IRI that
    each source declared are recorded in load order, along with the order
    in which named graphs were first populated.
    """
    def __init__(self):
        self.__store = oxigraph.Store()
        self.__sources: list[LoadedSource] = []
        self.__graph_order: dict[GraphName, None] = {}

    def __len__(self) -> int:
        return len(self.__store)

    @property
    def sources(self) -> list[LoadedSource]:
        return list(self.__sources)

    def add(self, quad: Quad):
    #=========================
        self.__note_graph(quad.graph_name)
        self.__store.add(quad)

    def load(self, name: str, quads: Iterable[Quad], prefixes: Optional[dict[str, str]]=None,
             base_iri: Optional[str]=None, graph: Optional[NamedNode]=None):
    #=======================================================================
        if graph is not None:
            quads = [Quad(quad.subject, quad.predicate, quad.object, graph)
                        if isDefaultGraph(quad.graph_name) else quad
                            for quad in quads]
        else:
            quads = list(quads)
        for quad in quads:
            self.__note_graph(quad.graph_name)
        self.__store.extend(quads)
        self.__sources.append(LoadedSource(name, dict(prefixes or {}), base_iri))

    def __note_graph(self, graph_name: GraphName):
    #=============================================
        if not isDefaultGraph(graph_name) and graph_name not in self.__graph_order:
            self.__graph_order[graph_name] = None

    def quads(self, graph_name: Optional[GraphName]=None) -> Iterator[Quad]:
    #======================================================================
        return self.__store.quads_for_pattern(None, None, None, graph_name)

    def graph_empty(self, graph_name: GraphName) -> bool:
    #====================================================
        try:
            self.quads(graph_name).__next__()
            return False
        except StopIteration:
            return True

    def default_graph_empty(self) -> bool:
    #=====================================
        return self.graph_empty(DefaultGraph())

    def populated_graphs(self) -> list[GraphName]:
    #=============================================
        """
        Non-empty named graphs, in the order in which they were first loaded.

        Graphs created by an update, rather than loaded, follow in IRI order.
        """
        graphs = list(self.__graph_order)
        created = [graph for graph in self.__store.named_graphs() if graph not in self.__graph_order]
        graphs.extend(sorted(created, key=lambda graph: str(graph)))
        return [graph for graph in graphs if not self.graph_empty(graph)]

    def query(self, sparql: str, base_iri: Optional[str]=None) -> QueryResults:
    #==========================================================================
        return self.__store.query(sparql, base_iri=base_iri,    # type: ignore
                                  use_default_graph_as_union=True)

    def update(self, sparql: str, base_iri: Optional[str]=None):
    #===========================================================
        self.__store.update(sparql, base_iri=base_iri)

    def dump(self, format: Format, graph_name: Optional[GraphName]=None,
             prefixes: Optional[dict[str, str]]=None) -> bytes:
    #=====================================================
        return self.__store.dump(format=rdf_format(format), from_graph=graph_name,      # type: ignore
                                 prefixes=prefixes or None)

#===============================================================================
#===============================================================================
