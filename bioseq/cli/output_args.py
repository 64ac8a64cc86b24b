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
Helper functions for writing CSV output files from the commandline.
"""

from ..default_parameters import OUTPUT_FILENAME


def add_output_args(
        parser,
        filename=OUTPUT_FILENAME,
        description="Output CSV file"):
    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "--output",
        default=filename,
        help=description)
    output_group.add_argument(
        "--output-columns",
        default=None,
        nargs="+",
        help="Subset of columns to write")
    return parser


def select_columns(df, columns):
    """
    Restrict a DataFrame to the given columns, raising ValueError
    for any name which isn't one of its columns.
    """
    if columns is None or len(columns) == 0:
        return df
    valid_columns = set(df.columns)
    for col in columns:
        if col not in valid_columns:
            raise ValueError("Column not found '%s', valid options: %s" % (
                col, list(df.columns)))
    return df[columns]


def write_dataframe(df, args):
    if len(args.output) == 0:
        raise ValueError("Output path must not be empty")
    df = select_columns(df, args.output_columns)
    df.to_csv(args.output, index=False)
