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
Commandline arguments for specifying input sequences and the
transformations to run on them.
"""

from argparse import ArgumentParser

from ..biotype import BioType
from ..default_parameters import MITOCHONDRIAL, OPERATIONS
from ..genetic_code import select_genetic_code
from ..sequence import Sequence


def add_sequence_args(parser):
    sequence_group = parser.add_argument_group("Sequences")
    sequence_group.add_argument(
        "--biotype",
        default="dna",
        choices=[name.lower() for name in BioType.__members__],
        help="Molecular kind of every input sequence (default: %(default)s)")
    sequence_group.add_argument(
        "--sequence",
        required=True,
        action="append",
        dest="sequences",
        help="Sequence letters, can be given multiple times")
    sequence_group.add_argument(
        "--operation",
        action="append",
        dest="operations",
        choices=OPERATIONS,
        help="Transformation to run, can be given multiple times "
        "(default: all of them)")
    sequence_group.add_argument(
        "--mitochondrial",
        default=MITOCHONDRIAL,
        action="store_true",
        help="Translate with the vertebrate mitochondrial codon table")
    return parser


def make_sequence_arg_parser(**kwargs):
    parser = ArgumentParser(**kwargs)
    return add_sequence_args(parser)


def sequences_from_args(args):
    biotype = BioType.from_name(args.biotype)
    return [Sequence(biotype, seq) for seq in args.sequences]


def genetic_code_from_args(args):
    return select_genetic_code(mitochondrial=args.mitochondrial)


def operations_from_args(args):
    if not args.operations:
        return list(OPERATIONS)
    return args.operations
