# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

__version__ = "0.1.0"


from .biotype import BioType
from .dataframe_builder import DataFrameBuilder, sequences_to_dataframe
from .errors import (
    BioTypeError,
    BioTypeMismatchError,
    ContractViolation,
    InvalidBaseError,
    SequenceError,
    SequenceIndexError,
    UnknownCodonError,
)
from .genetic_code import (
    GeneticCode,
    standard_genetic_code,
    translate_rna,
    vertebrate_mitochondrial_genetic_code,
)
from .sequence import Sequence
from .transformation_result import TransformationResult, apply_operation


__all__ = [
    "BioType",
    "Sequence",
    "GeneticCode",
    "standard_genetic_code",
    "vertebrate_mitochondrial_genetic_code",
    "translate_rna",
    "DataFrameBuilder",
    "sequences_to_dataframe",
    "TransformationResult",
    "apply_operation",
    "SequenceError",
    "BioTypeError",
    "InvalidBaseError",
    "ContractViolation",
    "BioTypeMismatchError",
    "UnknownCodonError",
    "SequenceIndexError",
]
