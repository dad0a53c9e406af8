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

from .version import __version__

from .inputs import InputSource, resolve_inputs, load_inputs
from .output import OutputTarget, resolve_output, serialize
from .prefixes import harvest
from .query import QueryResult, ResultKind, assemble, execute
from .rdf import Dataset
from .rdf.formats import Format
from .utils import Issue, IoFailure, ParseFailure, QueryFailure, UnknownFormat

#===============================================================================
