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
Gathered all the default function parameters in a single module, so that these
values can be shared between the library and the commandline.
"""

# number of characters per line when a Sequence is converted to a string
LINE_WIDTH = 80

# translate with the mitochondrial codon table instead of the standard one?
MITOCHONDRIAL = False

# transformations run by the commandline when none are requested,
# in the order their results are written
OPERATIONS = [
    "transcribe",
    "back_transcription",
    "complementary",
    "reverse_complementary",
    "translate",
]

# CSV file written by the commandline
OUTPUT_FILENAME = "bioseq-results.csv"
