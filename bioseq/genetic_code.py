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
GeneticCode objects contain the rules for translating RNA into a protein
sequence: the set of valid start and stop codons, as well as which
amino acid each RNA triplet is translated into.
"""

from .default_parameters import MITOCHONDRIAL
from .errors import UnknownCodonError

STOP = "*"


class GeneticCode(object):
    """
    Represents distinct translation tables to go from RNA triplets to amino
    acids.
    """
    def __init__(self, name, start_codons, stop_codons, codon_table):
        self.name = name
        self.start_codons = set(start_codons)
        self.stop_codons = set(stop_codons)
        self.codon_table = dict(codon_table)
        self._check_codons()

    def __repr__(self):
        return "GeneticCode(name='%s')" % (self.name,)

    def _check_codons(self):
        """
        If codon table is missing stop codons, then add them.
        """
        for stop_codon in self.stop_codons:
            if stop_codon in self.codon_table:
                if self.codon_table[stop_codon] != STOP:
                    raise ValueError(
                        ("Codon '%s' not found in stop_codons, but codon table "
                         "indicates that it should be") % (stop_codon,))
            else:
                self.codon_table[stop_codon] = STOP

        for start_codon in self.start_codons:
            if start_codon not in self.codon_table:
                raise ValueError(
                    "Start codon '%s' missing from codon table" % (
                        start_codon,))

        for codon, amino_acid in self.codon_table.items():
            if amino_acid == STOP and codon not in self.stop_codons:
                raise ValueError(
                    "Non-stop codon '%s' can't translate to '%s'" % (
                        codon, STOP))

        if len(self.codon_table) != 64:
            raise ValueError(
                "Expected 64 codons but found %d in codon table" % (
                    len(self.codon_table),))

    def __getitem__(self, codon):
        """
        Amino acid letter (or '*' for a stop codon) for a single codon,
        raises UnknownCodonError if the codon isn't in the table.
        """
        try:
            return self.codon_table[codon.upper()]
        except KeyError:
            raise UnknownCodonError(codon)

    def __contains__(self, codon):
        return codon.upper() in self.codon_table

    def translate(self, rna_sequence, first_codon_is_start=False):
        """
        Given an RNA sequence which is aligned to a reading frame, returns
        the translated protein sequence and a boolean flag indicating whether
        the translated sequence ended on a stop codon (or just ran out of codons).

        Parameters
        ----------
        rna_sequence : str
            RNA sequence which is expected to start on a complete codon,
            case is ignored.

        first_codon_is_start : bool
            Is the first codon of the sequence a start codon?
        """
        rna_sequence = rna_sequence.upper()
        n = len(rna_sequence)

        # 1 or 2 nucleotides dangling at the end don't make a codon
        end_idx = 3 * (n // 3)

        if first_codon_is_start and rna_sequence[:3] in self.start_codons:
            amino_acid_list = ['M']
            start_index = 3
        else:
            start_index = 0
            amino_acid_list = []

        ends_with_stop_codon = False
        for i in range(start_index, end_idx, 3):
            aa = self[rna_sequence[i:i + 3]]
            if aa == STOP:
                ends_with_stop_codon = True
                break
            amino_acid_list.append(aa)

        amino_acids = "".join(amino_acid_list)
        return amino_acids, ends_with_stop_codon

    def copy(
            self,
            name,
            start_codons=None,
            stop_codons=None,
            codon_table=None,
            codon_table_changes=None):
        """
        Make copy of this GeneticCode object with optional replacement
        values for all fields.
        """
        new_start_codons = (
            self.start_codons.copy()
            if start_codons is None
            else start_codons)

        new_stop_codons = (
            self.stop_codons.copy()
            if stop_codons is None
            else stop_codons)

        new_codon_table = (
            self.codon_table.copy()
            if codon_table is None
            else dict(codon_table))

        if codon_table_changes is not None:
            new_codon_table.update(codon_table_changes)

        return GeneticCode(
            name=name,
            start_codons=new_start_codons,
            stop_codons=new_stop_codons,
            codon_table=new_codon_table)


standard_genetic_code = GeneticCode(
    name="standard",
    start_codons={'AUG', 'CUG', 'UUG'},
    stop_codons={'UAA', 'UAG', 'UGA'},
    codon_table={
        'UUU': 'F', 'UUC': 'F', 'UUA': 'L', 'UUG': 'L',
        'UCU': 'S', 'UCC': 'S', 'UCA': 'S', 'UCG': 'S',
        'UAU': 'Y', 'UAC': 'Y', 'UAA': '*', 'UAG': '*',
        'UGU': 'C', 'UGC': 'C', 'UGA': '*', 'UGG': 'W',
        'CUU': 'L', 'CUC': 'L', 'CUA': 'L', 'CUG': 'L',
        'CCU': 'P', 'CCC': 'P', 'CCA': 'P', 'CCG': 'P',
        'CAU': 'H', 'CAC': 'H', 'CAA': 'Q', 'CAG': 'Q',
        'CGU': 'R', 'CGC': 'R', 'CGA': 'R', 'CGG': 'R',
        'AUU': 'I', 'AUC': 'I', 'AUA': 'I', 'AUG': 'M',
        'ACU': 'T', 'ACC': 'T', 'ACA': 'T', 'ACG': 'T',
        'AAU': 'N', 'AAC': 'N', 'AAA': 'K', 'AAG': 'K',
        'AGU': 'S', 'AGC': 'S', 'AGA': 'R', 'AGG': 'R',
        'GUU': 'V', 'GUC': 'V', 'GUA': 'V', 'GUG': 'V',
        'GCU': 'A', 'GCC': 'A', 'GCA': 'A', 'GCG': 'A',
        'GAU': 'D', 'GAC': 'D', 'GAA': 'E', 'GAG': 'E',
        'GGU': 'G', 'GGC': 'G', 'GGA': 'G', 'GGG': 'G'
    }
)

# Non-canonical start sites based on figure 2 of
#   "Global mapping of translation initiation sites in mammalian
#   cells at single-nucleotide resolution"
standard_genetic_code_with_extra_start_codons = standard_genetic_code.copy(
    name="standard-with-extra-start-codons",
    start_codons=standard_genetic_code.start_codons.union({
        'GUG',
        'AGG',
        'ACG',
        'AAG',
        'AUC',
        'AUA',
        'AUU'}))

vertebrate_mitochondrial_genetic_code = standard_genetic_code.copy(
    name="vertebrate-mitochondrial",
    # human mitochondria use only UAA and UAG stop codons
    # (http://mitomap.org/bin/view.pl/MITOMAP/HumanMitoCode)
    stop_codons={'UAA', 'UAG'},
    # AUU codes for isoleucine during elongation but can code for
    # methionine for initiation
    start_codons=['AUU', 'AUC', 'AUA', 'AUG', 'GUG'],
    # UGA codes for tryptophan instead of termination and AUA codes for
    # methionine instead of isoleucine
    codon_table_changes={'UGA': 'W', 'AUA': 'M'},
)


def select_genetic_code(mitochondrial=MITOCHONDRIAL):
    """
    Codon table used by Sequence.translate: the vertebrate mitochondrial
    code if `mitochondrial` is True, otherwise the standard code.
    """
    if mitochondrial:
        return vertebrate_mitochondrial_genetic_code
    return standard_genetic_code


def translate_rna(
        rna_sequence,
        first_codon_is_start=False,
        mitochondrial=MITOCHONDRIAL):
    """
    Given an RNA sequence which is aligned to a reading frame, returns
    the translated protein sequence and a boolean flag indicating whether
    the translated sequence ended on a stop codon (or just ran out of codons).

    Parameters
    ----------
    rna_sequence : str
        RNA sequence which is expected to start on a complete codon.

    first_codon_is_start : bool

    mitochondrial : bool
        Use the mitochondrial codon table instead of standard
        codon to amino acid table.
    """
    if mitochondrial:
        genetic_code = vertebrate_mitochondrial_genetic_code
    else:
        genetic_code = standard_genetic_code_with_extra_start_codons

    return genetic_code.translate(
        rna_sequence=rna_sequence,
        first_codon_is_start=first_codon_is_start)
