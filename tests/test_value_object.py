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

from bioseq.value_object import ValueObject
from .common import eq_


def test_no_fields_unless_specified():
    v = ValueObject()
    eq_(v._fields, ())
    eq_(v._values, ())


class Codon(ValueObject):
    __slots__ = ["triplet", "amino_acid"]


class StartCodon(Codon):
    __slots__ = ["is_canonical"]


def test_fields_collected_from_inheritance_hierarchy():
    eq_(StartCodon._fields, ("triplet", "amino_acid", "is_canonical"))


def test_default_init_and_string_repr():
    codon = Codon(triplet="AUG", amino_acid="M")
    eq_(codon.triplet, "AUG")
    eq_(str(codon), "Codon(triplet='AUG', amino_acid='M')")
    eq_(repr(codon), str(codon))


def test_missing_field_raises():
    try:
        Codon(triplet="AUG")
    except ValueError as e:
        assert "amino_acid" in str(e)
    else:
        assert False, "Expected ValueError for missing field"


def test_equality_and_hash():
    eq_(Codon(triplet="AUG", amino_acid="M"), Codon(triplet="AUG", amino_acid="M"))
    eq_(hash(Codon(triplet="AUG", amino_acid="M")),
        hash(Codon(triplet="AUG", amino_acid="M")))
    assert Codon(triplet="AUG", amino_acid="M") != Codon(triplet="UUU", amino_acid="F")
