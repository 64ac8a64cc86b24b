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

import pytest

from bioseq import (
    GeneticCode,
    UnknownCodonError,
    standard_genetic_code,
    translate_rna,
    vertebrate_mitochondrial_genetic_code,
)
from bioseq.genetic_code import select_genetic_code
from .common import eq_


def test_standard_codon_table_has_64_codons():
    eq_(len(standard_genetic_code.codon_table), 64)
    for codon in standard_genetic_code.codon_table:
        eq_(len(codon), 3)
        assert set(codon) <= set("ACGU"), codon


def test_standard_stop_codons():
    for codon in ["UAA", "UAG", "UGA"]:
        eq_(standard_genetic_code[codon], "*")


def test_codon_lookup_ignores_case():
    eq_(standard_genetic_code["aug"], "M")
    assert "uuu" in standard_genetic_code


def test_unknown_codon():
    with pytest.raises(UnknownCodonError) as exc_info:
        standard_genetic_code["ATG"]
    eq_(exc_info.value.codon, "ATG")
    assert "ATG" in str(exc_info.value)


def test_translate_rna_no_stop_codon():
    eq_(translate_rna("AUGAUG", first_codon_is_start=False), ("MM", False))


def test_translate_rna_stop_codon():
    eq_(translate_rna("AUGAUGUAG", first_codon_is_start=False), ("MM", True))


def test_translate_rna_stops_at_first_stop_codon():
    eq_(translate_rna("AUGUUUUAAGGG"), ("MF", True))


def test_translate_rna_ignores_dangling_nucleotides():
    eq_(translate_rna("AUGUUUAU"), ("MF", False))


def test_translate_rna_alternate_CUG_start():
    eq_(translate_rna("CUGCUG", first_codon_is_start=True), ("ML", False))


def test_translate_rna_CUG_after_start():
    eq_(translate_rna("CUGCUG", first_codon_is_start=False), ("LL", False))


def test_mitochondrial_UGA_is_tryptophan():
    eq_(translate_rna("AUGUGA", mitochondrial=True), ("MW", False))
    eq_(vertebrate_mitochondrial_genetic_code["AUA"], "M")


def test_copy_with_changes_leaves_original_alone():
    changed = standard_genetic_code.copy(
        name="no-amber",
        stop_codons={"UAA", "UGA"},
        codon_table_changes={"UAG": "O"})
    eq_(changed["UAG"], "O")
    eq_(standard_genetic_code["UAG"], "*")


def test_genetic_code_rejects_incomplete_table():
    with pytest.raises(ValueError):
        GeneticCode(
            name="tiny",
            start_codons={"AUG"},
            stop_codons={"UAA"},
            codon_table={"AUG": "M"})


def test_genetic_code_rejects_stop_marker_for_non_stop_codon():
    table = dict(standard_genetic_code.codon_table)
    table["UUU"] = "*"
    with pytest.raises(ValueError):
        GeneticCode(
            name="broken",
            start_codons={"AUG"},
            stop_codons={"UAA", "UAG", "UGA"},
            codon_table=table)


def test_select_genetic_code():
    assert select_genetic_code() is standard_genetic_code
    assert select_genetic_code(mitochondrial=False) is standard_genetic_code
    assert (
        select_genetic_code(mitochondrial=True) is
        vertebrate_mitochondrial_genetic_code)
