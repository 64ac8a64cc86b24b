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

from collections import OrderedDict
from enum import Enum

import pandas as pd

from .sequence import Sequence

VALID_ELEMENT_TYPES = (int, str, bytes, float, bool)

# values of these types are automatically converted to their size or length
# unless some other conversion function is provided
COLLECTION_TYPES = (tuple, list, set, frozenset)


class DataFrameBuilder(object):
    """
    Helper class for constructing a DataFrame from a subset of the fields
    of ValueObject instances.
    """
    def __init__(
            self,
            element_class,
            exclude=set([]),
            converters={},
            rename_dict={},
            extra_column_fns={},
            convert_collections_to_size=True):
        """
        Parameters
        ----------
        element_class : type
            Expected to a have a class-member named '_fields' which is a list
            of field names.

        exclude : set
            Field names from element_class which should not be used as
            columns for the DataFrame we're building

        converters : dict
            Dictionary of names mapping to functions. These functions will be
            applied to each element of a column before it's added to the
            DataFrame.

        rename_dict : dict
            Dictionary mapping element_class field names to desired column names
            in the produced DataFrame.

        extra_column_fns : dict
            Dictionary mapping column names to functions which take an
            element and return a single value for each row.

        convert_collections_to_size : bool
            If a value is a built-in collection (list, tuple, or set) then
            transform it to the size of that collection. If this option is False
            then collection values cause a runtime error.
        """
        self.element_class = element_class
        self.rename_dict = rename_dict
        self.converters = converters
        self.convert_collections_to_size = convert_collections_to_size

        # remove specified field names without changing the order of the others
        self.original_field_names = [
            x
            for x in element_class._fields
            if x not in exclude
        ]

        for name in converters:
            if name not in self.original_field_names:
                raise ValueError("No field named '%s', valid names: %s" % (
                    name,
                    self.original_field_names))

        self.renamed_field_names = [
            self.rename_dict.get(x, x)
            for x in self.original_field_names
        ]
        columns_list = [(name, []) for name in self.renamed_field_names]

        self.extra_column_fns = extra_column_fns
        for column_name in self.extra_column_fns:
            columns_list.append((column_name, []))

        self.columns_dict = OrderedDict(columns_list)

    def add(self, element):
        if not isinstance(element, self.element_class):
            raise TypeError("Expected %s but got %s" % (
                self.element_class.__name__,
                type(element)))

        for name in self.original_field_names:
            value = getattr(element, name)

            if name in self.converters:
                value = self.converters[name](value)

            if isinstance(value, Enum):
                value = str(value)
            elif isinstance(value, COLLECTION_TYPES) and self.convert_collections_to_size:
                value = len(value)
            elif not isinstance(value, VALID_ELEMENT_TYPES):
                raise ValueError(
                    "Please provide converter for field '%s' : %s to make a scalar or string" % (
                        name,
                        type(value)))

            self.columns_dict[self.rename_dict.get(name, name)].append(value)

        for column_name, fn in self.extra_column_fns.items():
            self.columns_dict[column_name].append(fn(element))

    def add_many(self, elements):
        for element in elements:
            self.add(element)

    def _check_column_lengths(self):
        """
        Make sure columns are of the same length or else DataFrame construction
        will fail.
        """
        column_lengths_dict = {
            name: len(xs)
            for (name, xs)
            in self.columns_dict.items()
        }
        unique_column_lengths = set(column_lengths_dict.values())
        if len(unique_column_lengths) > 1:
            raise ValueError(
                "Mismatch between lengths of columns: %s" % (column_lengths_dict,))

    def to_dataframe(self):
        self._check_column_lengths()
        return pd.DataFrame(self.columns_dict)


def sequences_to_dataframe(sequences):
    """
    DataFrame with one row per Sequence and columns biotype, seq, length.

    Parameters
    ----------
    sequences : iterable of Sequence

    Returns
    -------
    pandas.DataFrame
    """
    builder = DataFrameBuilder(
        Sequence,
        extra_column_fns={"length": len})
    builder.add_many(sequences)
    return builder.to_dataframe()
