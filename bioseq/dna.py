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
Base pairing and transcription rules for nucleotide strings, implemented
on plain Python strings.
"""

from .biotype import BioType
from .errors import InvalidBaseError

dna_complement_dictionary = {
    "A": "T",
    "G": "C",
    "T": "A",
    "C": "G",
}

rna_complement_dictionary = {
    "A": "U",
    "G": "C",
    "U": "A",
    "C": "G",
}

complement_dictionaries = {
    BioType.DNA: dna_complement_dictionary,
    BioType.RNA: rna_complement_dictionary,
}


def complement(seq, biotype):
    """
    Replace every base of a DNA or RNA string with its pairing partner.

    Parameters
    ----------
    seq : str
        Nucleotides, in any case.

    biotype : BioType
        Either BioType.DNA or BioType.RNA, selects the pairing table.

    Returns str of upper-case bases, raises InvalidBaseError if any
    character isn't one of the four bases for that biotype.
    """
    pairing = complement_dictionaries[biotype]
    result = []
    for base in seq.upper():
        if base not in pairing:
            raise InvalidBaseError(base, biotype)
        result.append(pairing[base])
    return "".join(result)


def complement_dna(seq):
    """
    Convert every A->T, T->A, C->G, G->C in a DNA sequence

    Parameters
    ----------
    seq : str

    Returns str
    """
    return complement(seq, BioType.DNA)


def complement_rna(seq):
    """
    Convert every A->U, U->A, C->G, G->C in an RNA sequence
    """
    return complement(seq, BioType.RNA)


def reverse_complement_dna(seq):
    return complement_dna(seq)[::-1]


def reverse_complement_rna(seq):
    return complement_rna(seq)[::-1]


def transcribe_dna(seq):
    """
    Upper-case a DNA string and replace every T with U.
    """
    return seq.upper().replace("T", "U")


def back_transcribe_rna(seq):
    """
    Upper-case an RNA string and replace every U with T.
    """
    return seq.upper().replace("U", "T")
