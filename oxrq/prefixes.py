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

from types import MappingProxyType
from typing import Mapping, Optional, TypeAlias

#===============================================================================

from .rdf import Dataset

#===============================================================================

PrefixMapping: TypeAlias = Mapping[str, str]

#===============================================================================

def harvest(dataset: Dataset) -> PrefixMapping:
#==============================================
    """
    Collect the prefixes declared by the dataset's sources, in load order.

    The first declaration of a prefix is kept and later ones are ignored,
    so a data-less file listing preferred prefixes, given first, overrides
    whatever the actual data declares.
    """
    prefixes: dict[str, str] = {}
    for source in dataset.sources:
        for prefix, ns_uri in source.prefixes.items():
            if prefix not in prefixes:
                prefixes[prefix] = ns_uri
    return MappingProxyType(prefixes)

def base_iri(dataset: Dataset, explicit: Optional[str]=None) -> Optional[str]:
#============================================================================
    if explicit is not None:
        return explicit
    for source in dataset.sources:
        if source.base_iri is not None:
            return source.base_iri
    return None

#===============================================================================
#===============================================================================
