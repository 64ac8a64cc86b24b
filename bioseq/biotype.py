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

from enum import Enum


class BioType(Enum):
    """
    Molecular kind of a Sequence, which determines the transformations
    that can be applied to it.
    """
    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "PROTEIN"

    def __str__(self):
        return self.value

    @classmethod
    def from_name(cls, name):
        """
        Parse a case-insensitive biotype name such as "dna" or "Protein".
        """
        key = str(name).strip().upper()
        if key not in cls.__members__:
            raise ValueError(
                "Unknown biotype '%s', valid options: %s" % (
                    name,
                    ", ".join(cls.__members__)))
        return cls[key]

    @property
    def is_nucleotide(self):
        return self is not BioType.PROTEIN
