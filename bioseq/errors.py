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
Exceptions come in two groups:

    - SequenceError and its subclasses are raised when an operation doesn't
      apply to the data it was given (e.g. transcribing a protein or
      complementing a sequence with an unexpected base). Callers are expected
      to catch these.

    - ContractViolation and its subclasses indicate that a caller broke a
      precondition (adding sequences of different biotypes, indexing past
      the end of a sequence, translating a codon which isn't in the table).
"""


class SequenceError(ValueError):
    pass


class BioTypeError(SequenceError):
    """
    Operation isn't defined for the biotype of the sequence.
    """
    def __init__(self, operation, biotype, message=None):
        self.operation = operation
        self.biotype = biotype
        if message is None:
            message = "you cannot %s a %s sequence" % (operation, biotype)
        SequenceError.__init__(self, message)


class InvalidBaseError(SequenceError):
    """
    Character outside of the base pairing alphabet for a DNA or RNA sequence.
    """
    def __init__(self, base, biotype):
        self.base = base
        self.biotype = biotype
        SequenceError.__init__(
            self,
            "Invalid %s base: %s" % (biotype, base))


class ContractViolation(Exception):
    pass


class BioTypeMismatchError(ContractViolation, TypeError):
    def __init__(self, left_biotype, right_biotype):
        self.left_biotype = left_biotype
        self.right_biotype = right_biotype
        ContractViolation.__init__(
            self,
            "Cannot add a %s sequence to a %s sequence" % (
                right_biotype,
                left_biotype))


class UnknownCodonError(ContractViolation, KeyError):
    def __init__(self, codon):
        self.codon = codon
        ContractViolation.__init__(
            self,
            "Codon '%s' not found in codon table" % (codon,))

    def __str__(self):
        # KeyError would otherwise quote the whole message
        return self.args[0]


class SequenceIndexError(ContractViolation, IndexError):
    def __init__(self, offset, length):
        self.offset = offset
        self.length = length
        ContractViolation.__init__(
            self,
            "Offset %s out of range for sequence of length %d" % (
                offset,
                length))
