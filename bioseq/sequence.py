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
Sequence is a biological sequence (DNA, RNA or protein) stored as a string
of single-letter codes together with its BioType.

Offsets and lengths are counted in characters, which for the single-byte
alphabets of nucleotides and amino acids is the same as counting bytes.
"""

from .biotype import BioType
from .default_parameters import LINE_WIDTH
from .dna import complement, transcribe_dna, back_transcribe_rna
from .errors import BioTypeError, BioTypeMismatchError, SequenceIndexError
from .genetic_code import STOP, standard_genetic_code
from .logging import get_logger
from .value_object import ValueObject

logger = get_logger(__name__)


def _check_character(ch):
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError("Expected a single character but got %r" % (ch,))


class Sequence(ValueObject):
    """
    Biological sequence with a fixed BioType.

    Transformations never modify the sequence they're called on, they
    always return a new Sequence. Only push() and change() edit in place.
    """
    __slots__ = [
        "biotype",
        "seq",
    ]

    def __init__(self, biotype, seq):
        """
        Parameters
        ----------
        biotype : BioType

        seq : str
            Sequence letters, not checked against the alphabet of the biotype.
        """
        ValueObject.__init__(self, biotype=biotype, seq=seq)

    def index(self, offset):
        """
        Character at a base 0 offset, raises SequenceIndexError if the
        offset is outside of the sequence.
        """
        if not (0 <= offset < len(self.seq)):
            raise SequenceIndexError(offset, len(self.seq))
        return self.seq[offset]

    def __getitem__(self, offset):
        return self.index(offset)

    def push(self, ch):
        """
        Append a single character to the end of the sequence.
        """
        _check_character(ch)
        self.seq += ch

    def change(self, offset, ch):
        """
        Replace the character at a base 0 offset, offsets outside the
        sequence leave it unchanged. For edits of larger regions work
        on the `seq` string directly.
        """
        _check_character(ch)
        self.seq = "".join(
            ch if i == offset else c
            for (i, c) in enumerate(self.seq))

    def __len__(self):
        return len(self.seq)

    def count(self, substring):
        """
        Number of non-overlapping occurrences of `substring`.
        """
        return self.seq.count(substring)

    def __add__(self, other):
        """
        Adding two Sequences requires them to have the same biotype, adding
        a string appends it and keeps the biotype of this sequence.
        """
        if isinstance(other, Sequence):
            if self.biotype != other.biotype:
                raise BioTypeMismatchError(self.biotype, other.biotype)
            return Sequence(self.biotype, self.seq + other.seq)
        elif isinstance(other, str):
            return Sequence(self.biotype, self.seq + other)
        return NotImplemented

    def __eq__(self, other):
        # equality ignores biotype
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.seq == other.seq

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def lines(self, line_width=LINE_WIDTH):
        """
        Sequence split into chunks of `line_width` characters, the last
        of which may be shorter.
        """
        return [
            self.seq[i:i + line_width]
            for i in range(0, len(self.seq), line_width)
        ]

    def __str__(self):
        return "Bio Sequence Type is :%s\nSequence:\n%s" % (
            self.biotype,
            "\n".join(self.lines()))

    def __repr__(self):
        return ValueObject.__str__(self)

    def transcribe(self):
        """
        Transcribe a DNA sequence into RNA, replacing every T with U.

        Returns
        -------
        Sequence with biotype RNA, raises BioTypeError for RNA or protein.
        """
        if self.biotype is not BioType.DNA:
            raise BioTypeError("transcribe", self.biotype)
        return Sequence(BioType.RNA, transcribe_dna(self.seq))

    def back_transcription(self):
        """
        Replace every U of an RNA sequence with T.

        The result keeps the RNA biotype, use
        Sequence(BioType.DNA, result.seq) to relabel it.

        Returns
        -------
        Sequence, raises BioTypeError for DNA or protein.
        """
        if self.biotype is not BioType.RNA:
            raise BioTypeError("back transcribe", self.biotype)
        return Sequence(BioType.RNA, back_transcribe_rna(self.seq))

    def complementary(self):
        """
        Complement of a DNA (A<->T, G<->C) or RNA (A<->U, G<->C) sequence.

        Returns
        -------
        Sequence with the same biotype. Raises InvalidBaseError if a
        character isn't one of the four bases and BioTypeError for protein.
        """
        if not self.biotype.is_nucleotide:
            raise BioTypeError("complement", self.biotype)
        return Sequence(self.biotype, complement(self.seq, self.biotype))

    def reverse_complementary(self):
        result = self.complementary()
        result.seq = result.seq[::-1]
        return result

    def translate(self, genetic_code=standard_genetic_code):
        """
        Translate a DNA or RNA sequence codon by codon, DNA being transcribed
        first, until a stop codon or fewer than three nucleotides remain.

        The returned Sequence is labeled PROTEIN but holds the upper-cased
        nucleotide text of this sequence (untranscribed for DNA) rather than
        the amino acids; the amino acids are available from
        GeneticCode.translate.

        Parameters
        ----------
        genetic_code : GeneticCode
            Codon table used for each triplet.

        Returns
        -------
        Sequence with biotype PROTEIN. Raises BioTypeError for a protein and
        UnknownCodonError for a triplet missing from the codon table.
        """
        if self.biotype is BioType.PROTEIN:
            raise BioTypeError("translate", self.biotype)
        if self.biotype is BioType.DNA:
            rna = self.transcribe().seq
        else:
            rna = self.seq.upper()
        amino_acids, ends_with_stop_codon = genetic_code.translate(rna)
        if ends_with_stop_codon:
            amino_acids += STOP
        logger.debug(
            "Translated %s sequence of length %d into '%s'",
            self.biotype,
            len(self.seq),
            amino_acids)
        return Sequence(BioType.PROTEIN, self.seq.upper())
