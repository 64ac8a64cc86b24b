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
Primary bioseq command, runs transformations (transcription,
complementation, translation, &c) on sequences given on the commandline
and writes one CSV row per sequence and transformation.
"""

import sys

from ..logging import get_logger
from ..transformation_result import (
    apply_operations,
    transformation_results_to_dataframe,
)

from .output_args import add_output_args, write_dataframe
from .sequence_args import (
    genetic_code_from_args,
    make_sequence_arg_parser,
    operations_from_args,
    sequences_from_args,
)

logger = get_logger(__name__)


def make_bioseq_arg_parser():
    parser = make_sequence_arg_parser(
        prog="bioseq",
        description="Transform DNA, RNA and protein sequences")
    return add_output_args(parser)


def run(args=None):
    if args is None:
        args = sys.argv[1:]
    parser = make_bioseq_arg_parser()
    args = parser.parse_args(args)
    logger.info(args)
    results = apply_operations(
        sequences_from_args(args),
        operations_from_args(args),
        genetic_code=genetic_code_from_args(args),
        record_contract_violations=True)
    df = transformation_results_to_dataframe(results)
    logger.info(df)
    write_dataframe(df, args)
    return df
