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

import tempfile
from os import remove
from os.path import getsize

import pandas as pd
import pytest

from bioseq.cli.bioseq_main import run as bioseq_main
from .common import eq_


def run_cli(extra_args):
    with tempfile.NamedTemporaryFile(suffix=".csv", delete=False) as f:
        output_path = f.name
    try:
        bioseq_main(extra_args + ["--output", output_path])
        assert getsize(output_path) > 0
        return pd.read_csv(output_path, keep_default_na=False)
    finally:
        remove(output_path)


def test_cli_all_operations():
    df = run_cli(["--biotype", "dna", "--sequence", "ATGTTTTAA"])
    eq_(list(df.operation), [
        "transcribe",
        "back_transcription",
        "complementary",
        "reverse_complementary",
        "translate",
    ])
    results = dict(zip(df.operation, df.result))
    eq_(results["transcribe"], "AUGUUUUAA")
    eq_(results["back_transcription"], "")
    eq_(results["complementary"], "TACAAAATT")
    eq_(results["reverse_complementary"], "TTAAAACAT")
    eq_(results["translate"], "ATGTTTTAA")


def test_cli_selected_operations_and_columns():
    df = run_cli([
        "--biotype", "rna",
        "--sequence", "AUGC",
        "--sequence", "GGCC",
        "--operation", "complementary",
        "--output-columns", "input", "result",
    ])
    eq_(list(df.columns), ["input", "result"])
    eq_(list(df.result), ["UACG", "CCGG"])


def test_cli_unknown_output_column():
    with pytest.raises(ValueError):
        run_cli([
            "--sequence", "ATG",
            "--output-columns", "amino_acids",
        ])


def test_cli_requires_sequence():
    with pytest.raises(SystemExit):
        bioseq_main(["--biotype", "dna"])


def test_cli_records_unknown_codon_and_keeps_other_rows():
    df = run_cli([
        "--sequence", "ATGTTT",
        "--sequence", "ATGNNN",
        "--operation", "translate",
        "--operation", "transcribe",
    ])
    eq_(len(df), 4)
    rows = {
        (input_seq, operation): (result, error)
        for (input_seq, operation, result, error)
        in zip(df.input, df.operation, df.result, df.error)
    }
    eq_(rows[("ATGTTT", "translate")], ("ATGTTT", ""))
    eq_(rows[("ATGNNN", "transcribe")], ("AUGNNN", ""))
    result, error = rows[("ATGNNN", "translate")]
    eq_(result, "")
    assert "NNN" in error, error


def test_cli_mitochondrial_translation():
    # UGA is a stop codon in the standard table but not the mitochondrial one,
    # so only the mitochondrial run looks up the codon after it
    args = ["--biotype", "rna", "--sequence", "AUGUGAXXX", "--operation", "translate"]
    standard = run_cli(args)
    eq_(list(standard.result), ["AUGUGAXXX"])
    eq_(list(standard.error), [""])
    mitochondrial = run_cli(args + ["--mitochondrial"])
    eq_(list(mitochondrial.result), [""])
    assert "XXX" in mitochondrial.error[0], mitochondrial.error[0]
