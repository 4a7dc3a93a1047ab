"""
Raw attribute normalization and raw-to-normalized file conversion.
"""

import pytest
import torch

from bankclusters.exceptions import MalformedInputError, IOUnavailableError
from bankclusters.io.loader import load_dataset
from bankclusters.io.normalize import (
    AttributeTransform, CUSTOMER_TRANSFORMS, convert_training_file, normalize,
    normalize_age, normalize_income, normalize_records, normalize_score,
)


def test_reference_transform_endpoints():
    assert normalize_age(20) == 0.0
    assert normalize_age(100) == 1.0
    assert normalize_income(20) == 0.0
    assert normalize_income(60) == 0.5
    assert normalize_score(500) == 0.0
    assert normalize_score(900) == 1.0


def test_out_of_domain_values_are_not_clamped():
    assert normalize_age(10) == pytest.approx(-0.125)
    assert normalize_score(1100) == pytest.approx(1.5)


def test_generic_transform():
    assert normalize(7.0, 2.0, 10.0) == pytest.approx(0.5)
    assert AttributeTransform("x", 1, 4).apply(3) == 0.5
    assert [t.name for t in CUSTOMER_TRANSFORMS] == ["age", "income", "credit_score"]


def test_normalize_records():
    rows = normalize_records("2 3\n20 20 500\n100 60 900\n")
    assert rows == [[0.0, 0.0, 0.0], [1.0, 0.5, 1.0]]


@pytest.mark.parametrize("text", [
    "2 3\n20.5 20 500\n100 60 900\n",
    "1 2\n20 20\n",
    "2 3\n20 20 500\n",
    "1 3\n20 twenty 500\n",
    "1 3\n2_0 20 500\n",
    "1_0 3\n20 20 500\n",
])
def test_bad_raw_input_rejected(text):
    with pytest.raises(MalformedInputError):
        normalize_records(text)


def test_convert_training_file_round_trips_through_loader(tmp_path):
    raw = tmp_path / "raw.txt"
    raw.write_text("2 3\n20 20 500\n100 60 900\n")
    out = tmp_path / "normalized.txt"

    written = convert_training_file(raw, out)

    assert written == out
    assert out.read_text().splitlines() == ["2 3", "0.0 0.0 0.0", "1.0 0.5 1.0"]
    dataset = load_dataset(out)
    assert torch.equal(dataset.records,
                       torch.tensor([[0.0, 0.0, 0.0], [1.0, 0.5, 1.0]], dtype=torch.float64))


def test_convert_missing_input(tmp_path):
    with pytest.raises(IOUnavailableError):
        convert_training_file(tmp_path / "missing.txt", tmp_path / "out.txt")
