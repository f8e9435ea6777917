import math

import pytest

from ose.config.validation import require_positive, validate_analyze_inputs
from ose.exceptions import ConfigValidationError

VALID = {"strike": 100.0, "price": 100.0, "price_range": 0.15, "width": 5.0, "size": 1, "days": 30}


def test_valid_inputs_pass():
    validate_analyze_inputs(**VALID)


@pytest.mark.parametrize("value", [None, 0, -1.0, math.nan, math.inf, -math.inf])
def test_require_positive_rejects_non_finite_and_non_positive(value):
    with pytest.raises(ConfigValidationError, match="strike"):
        require_positive("strike", value)


@pytest.mark.parametrize(
    "field,value",
    [
        ("strike", math.nan),
        ("price", math.inf),
        ("width", 0.0),
        ("days", 0),
        ("price_range", 1.5),
        ("price_range", math.nan),
        ("price_range", 0.0),
    ],
)
def test_validate_analyze_inputs_rejects_bad_fields(field, value):
    with pytest.raises(ConfigValidationError):
        validate_analyze_inputs(**{**VALID, field: value})
