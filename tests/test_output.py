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

from io import BytesIO

import pyoxigraph as oxigraph
import pytest
from structlog.testing import capture_logs

#===============================================================================

from oxrq.output import resolve_output, serialize, write_output
from oxrq.query import QueryResult, ResultKind, execute
from oxrq.rdf import Dataset, DefaultGraph, Literal, NamedNode, Quad
from oxrq.rdf.formats import Format
from oxrq.utils import IoFailure

#===============================================================================

EX = 'https://example.org/'

def ex(name: str) -> NamedNode:
    return NamedNode(f'{EX}{name}')

GRAPH_A = ex('graphs/a')
GRAPH_B = ex('graphs/b')

#===============================================================================

def mutated(dataset: Dataset) -> QueryResult:
    return QueryResult(ResultKind.MUTATED_DATASET, dataset=dataset)

def named_graphs_dataset() -> Dataset:
#=====================================
    dataset = Dataset()
    dataset.load('b.ttl', [Quad(ex('s'), ex('p'), Literal('b'))], graph=GRAPH_B)
    dataset.load('a.ttl', [Quad(ex('s'), ex('p'), Literal('a'))], graph=GRAPH_A)
    return dataset

def parse(data: bytes, format: oxigraph.RdfFormat) -> set[oxigraph.Quad]:
    return set(oxigraph.parse(data, format=format))

#===============================================================================

def test_tabular_default():
#==========================
    result = execute(Dataset(), 'select ?s { ?s ?p ?o }')
    target = resolve_output(result)
    assert target.format == Format.TSV
    assert serialize(target).startswith(b'?s')

def test_tabular_requested():
#============================
    result = execute(Dataset(), 'ask {}')
    target = resolve_output(result, 'json')
    assert target.format == Format.JSON
    assert b'"boolean"' in serialize(target)

def test_dataset_format_outputs_everything():
#============================================
    dataset = named_graphs_dataset()
    target = resolve_output(mutated(dataset))
    assert target.format == Format.TRIG
    assert target.graph_name is None
    output = parse(serialize(target), oxigraph.RdfFormat.TRIG)
    assert output == set(dataset.quads())

def test_round_trip_nquads():
#============================
    dataset = named_graphs_dataset()
    dataset.add(Quad(ex('s'), ex('p'), Literal('default')))
    output = serialize(resolve_output(mutated(dataset), 'nq'))
    assert parse(output, oxigraph.RdfFormat.N_QUADS) == set(dataset.quads())

def test_single_graph_prefers_default_graph():
#=============================================
    dataset = named_graphs_dataset()
    dataset.add(Quad(ex('s'), ex('p'), Literal('default')))
    target = resolve_output(mutated(dataset), 'nt')
    assert target.graph_name == DefaultGraph()
    assert parse(serialize(target), oxigraph.RdfFormat.N_TRIPLES) == {
        Quad(ex('s'), ex('p'), Literal('default'))
    }

def test_single_graph_uses_first_loaded_graph():
#===============================================
    target = resolve_output(mutated(named_graphs_dataset()), 'nt')
    assert target.graph_name == GRAPH_B
    assert parse(serialize(target), oxigraph.RdfFormat.N_TRIPLES) == {
        Quad(ex('s'), ex('p'), Literal('b'))
    }

def test_single_graph_warns_about_other_graphs():
#==================================================
    with capture_logs() as logs:
        resolve_output(mutated(named_graphs_dataset()), 'ttl')
    warnings = [entry for entry in logs if entry['log_level'] == 'warning']
    assert len(warnings) == 1
    assert GRAPH_B.value in warnings[0]['event']

def test_single_graph_order_with_many_graphs():
#==============================================
    dataset = Dataset()
    graphs = [ex(f'graphs/{n}') for n in reversed(range(500))]
    dataset.load('many.nq', [Quad(ex('s'), ex('p'), Literal(str(n)), graph)
                                for n in range(3) for graph in graphs])
    assert dataset.populated_graphs() == graphs
    assert resolve_output(mutated(dataset), 'nt').graph_name == graphs[0]

def test_single_graph_skips_emptied_graphs():
#============================================
    dataset = named_graphs_dataset()
    dataset.update(f'clear graph <{GRAPH_B.value}>')
    assert resolve_output(mutated(dataset), 'ttl').graph_name == GRAPH_A

def test_single_graph_includes_graphs_from_updates():
#====================================================
    dataset = Dataset()
    dataset.update(f'insert data {{ graph <{EX}graphs/new> {{ <{EX}s> <{EX}p> "new" }} }}')
    assert resolve_output(mutated(dataset), 'ttl').graph_name == ex('graphs/new')

def test_single_graph_empty_dataset():
#=====================================
    target = resolve_output(mutated(Dataset()), 'nt')
    assert target.graph_name == DefaultGraph()
    assert serialize(target) == b''
    assert b'RDF' in serialize(resolve_output(mutated(Dataset()), 'rdf'))

def test_prefix_hints():
#=======================
    dataset = Dataset()
    dataset.add(Quad(ex('item/1'), ex('vocab/name'), Literal('Item 1')))
    output = serialize(resolve_output(mutated(dataset), 'ttl'), {'v': f'{EX}vocab/'})
    assert b'v:name' in output

def test_unwritable_output():
#============================
    class BrokenPipe(BytesIO):
        def write(self, *args):
            raise BrokenPipeError(32, 'Broken pipe')

    with pytest.raises(IoFailure) as failure:
        write_output(b'data', BrokenPipe())
    assert failure.value.path == '<stdout>'

def test_write_output():
#=======================
    stream = BytesIO()
    write_output(b'data', stream)
    assert stream.getvalue() == b'data'

#===============================================================================
#===============================================================================
