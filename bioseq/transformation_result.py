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

"""
Outcome of running one named transformation on one Sequence, recording
either the resulting sequence or why the transformation didn't apply.
"""

from .dataframe_builder import DataFrameBuilder
from .default_parameters import OPERATIONS
from .errors import BioTypeError, ContractViolation, SequenceError
from .genetic_code import standard_genetic_code
from .logging import get_logger
from .value_object import ValueObject

logger = get_logger(__name__)


class TransformationResult(ValueObject):
    __slots__ = [
        # sequence letters before the transformation
        "input",
        "biotype",
        "operation",
        # empty when the transformation failed
        "result",
        "result_biotype",
        # empty when the transformation succeeded
        "error",
    ]

    @property
    def succeeded(self):
        return len(self.error) == 0


def _failed_result(sequence, operation, error):
    return TransformationResult(
        input=sequence.seq,
        biotype=str(sequence.biotype),
        operation=operation,
        result="",
        result_biotype="",
        error=str(error))


def apply_operation(
        sequence,
        operation,
        genetic_code=standard_genetic_code,
        record_contract_violations=False):
    """
    Run the Sequence method named `operation`, turning a SequenceError into
    a TransformationResult with its message in the `error` field.

    Parameters
    ----------
    sequence : Sequence

    operation : str
        One of transcribe, back_transcription, complementary,
        reverse_complementary, translate

    genetic_code : GeneticCode
        Codon table passed to Sequence.translate

    record_contract_violations : bool
        Also record a ContractViolation (e.g. a codon missing from the
        codon table) in the `error` field instead of raising it.

    Returns
    -------
    TransformationResult
    """
    if operation not in OPERATIONS:
        raise ValueError("Unknown operation '%s', valid options: %s" % (
            operation,
            OPERATIONS))
    method = getattr(sequence, operation)
    try:
        if operation == "translate":
            transformed = method(genetic_code=genetic_code)
        else:
            transformed = method()
    except BioTypeError as e:
        logger.info("Skipping %s of '%s': %s", operation, sequence.seq, e)
        return _failed_result(sequence, operation, e)
    except SequenceError as e:
        logger.warning("Failed to %s '%s': %s", operation, sequence.seq, e)
        return _failed_result(sequence, operation, e)
    except ContractViolation as e:
        if not record_contract_violations:
            raise
        logger.warning("Failed to %s '%s': %s", operation, sequence.seq, e)
        return _failed_result(sequence, operation, e)
    return TransformationResult(
        input=sequence.seq,
        biotype=str(sequence.biotype),
        operation=operation,
        result=transformed.seq,
        result_biotype=str(transformed.biotype),
        error="")


def apply_operations(sequences, operations=OPERATIONS, **kwargs):
    """
    Generator of TransformationResult for every combination of sequence
    and operation, keyword arguments are passed on to apply_operation.
    """
    for sequence in sequences:
        for operation in operations:
            yield apply_operation(sequence, operation, **kwargs)


def transformation_results_to_dataframe(results):
    builder = DataFrameBuilder(TransformationResult)
    builder.add_many(results)
    return builder.to_dataframe()
