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

import pytest

#===============================================================================

from oxrq.rdf.formats import Format
from oxrq.rdf.formats import check_output_format, is_tabular, rdf_format, results_format
from oxrq.rdf.formats import resolve_format, resolve_output_format, suffix_token
from oxrq.rdf.formats import supports_dataset, supports_prefixes
from oxrq.utils import UnknownFormat

#===============================================================================

def test_explicit_format_wins():
#===============================
    assert resolve_format('ttl', 'rdf') == Format.TURTLE
    assert resolve_format('application/n-quads', None) == Format.N_QUADS
    assert resolve_format('RDFXML', 'ttl') == Format.RDF_XML

def test_suffix_formats():
#=========================
    assert resolve_format(None, 'ttl') == Format.TURTLE
    assert resolve_format(None, 'trig') == Format.TRIG
    assert resolve_format(None, 'rdf') == Format.RDF_XML
    assert resolve_format(None, 'xml') == Format.RDF_XML
    assert resolve_format(None, 'nq') == Format.N_QUADS
    assert resolve_format(None, 'nt') == Format.N_TRIPLES
    assert resolve_format(None, 'NT') == Format.N_TRIPLES

def test_default_input_format():
#===============================
    assert resolve_format(None, None) == Format.TRIG

def test_unknown_input_formats():
#================================
    with pytest.raises(UnknownFormat):
        resolve_format('bogus', None)
    with pytest.raises(UnknownFormat):
        resolve_format(None, 'txt')
    # Query results formats are output only
    with pytest.raises(UnknownFormat):
        resolve_format(None, 'csv')
    with pytest.raises(UnknownFormat):
        resolve_format('tsv', 'ttl')

def test_output_formats():
#=========================
    assert resolve_output_format(None, True) == Format.TSV
    assert resolve_output_format(None, False) == Format.TRIG
    assert resolve_output_format('csv', True) == Format.CSV
    assert resolve_output_format('xml', True) == Format.XML
    assert resolve_output_format('xml', False) == Format.RDF_XML
    assert resolve_output_format('nq', False) == Format.N_QUADS
    with pytest.raises(UnknownFormat):
        resolve_output_format('csv', False)
    with pytest.raises(UnknownFormat):
        resolve_output_format('ttl', True)

def test_check_output_format():
#==============================
    check_output_format(None)
    check_output_format('csv')
    check_output_format('rdf')
    with pytest.raises(UnknownFormat):
        check_output_format('bogus')

def test_format_capabilities():
#==============================
    datasets = {format for format in Format if supports_dataset(format)}
    assert datasets == {Format.TRIG, Format.N_QUADS}
    tabular = {format for format in Format if is_tabular(format)}
    assert tabular == {Format.CSV, Format.TSV, Format.JSON, Format.XML}
    prefixed = {format for format in Format if supports_prefixes(format)}
    assert prefixed == {Format.TURTLE, Format.TRIG, Format.N3}

def test_engine_formats():
#=========================
    for format in Format:
        if is_tabular(format):
            results_format(format)
            with pytest.raises(UnknownFormat):
                rdf_format(format)
        else:
            rdf_format(format)
            with pytest.raises(UnknownFormat):
                results_format(format)

def test_suffix_token():
#=======================
    assert suffix_token('data/file1.TTL') == 'ttl'
    assert suffix_token('archive.tar.nq') == 'nq'
    assert suffix_token('README') is None
    assert suffix_token('.hidden') is None

#===============================================================================
#===============================================================================
