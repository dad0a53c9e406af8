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
import logging
import sys
from typing import BinaryIO, Optional

#===============================================================================

from oxrq import __version__
from oxrq.inputs import load_inputs, resolve_inputs
from oxrq.output import resolve_output, serialize, write_output
from oxrq.prefixes import base_iri, harvest
from oxrq.query import assemble, execute, read_query_file
from oxrq.rdf import Dataset
from oxrq.rdf.formats import check_output_format
from oxrq.utils import Issue, log, pretty_log, set_log_level

#===============================================================================

@dataclass(frozen=True)
class Options:
    query: Optional[str] = None
    files: list[str] = field(default_factory=list)
    input_format: Optional[str] = None
    output_format: Optional[str] = None
    base_iri: Optional[str] = None
    file_query: bool = False
    no_stdin: bool = False

#===============================================================================

def run(options: Options, stdin: Optional[BinaryIO]=None, stdout: Optional[BinaryIO]=None):
#==========================================================================================
    check_output_format(options.output_format)

    files = list(options.files)
    query = options.query
    if options.file_query and query is not None:
        files.insert(0, query)
        query = None

    inputs = resolve_inputs(files, input_format=options.input_format,
                            no_stdin=options.no_stdin, file_query=options.file_query)
    dataset = Dataset()
    load_inputs(inputs.sources, dataset, base_iri=options.base_iri, stdin=stdin)
    prefixes = harvest(dataset)

    if inputs.query_file is not None:
        log.debug(f'Query from {pretty_log(inputs.query_file)}')
        query_body = read_query_file(inputs.query_file)
    else:
        query_body = query or ''
    query_text = assemble(query_body, prefixes)
    log.debug(f'Query: {query_text}')

    result = execute(dataset, query_text, base_iri=base_iri(dataset, options.base_iri),
                     query_body=query_body)
    target = resolve_output(result, options.output_format)
    output = serialize(target, prefixes)
    write_output(output, stdout or sys.stdout.buffer)

#===============================================================================

def main():
    import argparse
    parser = argparse.ArgumentParser(description='Run SPARQL queries over RDF files and streams')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('--debug', action='store_true', help='Show sources and the assembled query')
    parser.add_argument('-i', '--input-format', metavar='FORMAT', help='Input RDF format (ttl, trig, rdf, nt, nq, n3)')
    parser.add_argument('-o', '--output-format', metavar='FORMAT',
        help='Output RDF format (ttl, trig, rdf, nt, nq, n3) or SPARQL results format (tsv, csv, json, xml)')
    parser.add_argument('-b', '--base-iri', metavar='IRI', help='Base IRI used when parsing')
    parser.add_argument('-f', '--file-query', action='store_true', help="Provide query via file (with '.rq' suffix)")
    parser.add_argument('-n', '--no-stdin', action='store_true', help="Do not read from stdin (unless '-' is given as file)")
    parser.add_argument('query', nargs='?', help="Query string (unless '--file-query' is used)")
    parser.add_argument('file', nargs='*', help="RDF file(s), '-' for stdin")

    args = parser.parse_intermixed_args()
    if args.debug:
        set_log_level(logging.DEBUG)

    options = Options(query=args.query, files=args.file,
                      input_format=args.input_format, output_format=args.output_format,
                      base_iri=args.base_iri, file_query=args.file_query, no_stdin=args.no_stdin)
    try:
        run(options)
    except Issue as issue:
        log.error(issue.reason)
        sys.exit(1)

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
#===============================================================================
