import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import grade_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from grade_toolkit.core.models import (  # noqa: E402
    CalculationMode,
    Element,
    ElementScore,
    Norm,
    Test,
    TestType,
)


# Common test fixtures
@pytest.fixture
def two_elements():
    """Two composite elements, A out of 10 and B out of 20."""
    return (
        Element("a", "A", max_points=10, weight=1.0, order=0),
        Element("b", "B", max_points=20, weight=1.0, order=1),
    )


@pytest.fixture
def cvte_test():
    """CvTE test with a default norm and a HAVO level norm."""
    return Test(
        id="t-cvte",
        name="Hoofdstuk 3",
        test_type=TestType.CVTE,
        default_norm=Norm(50, 1.0, CalculationMode.OFFICIAL),
        level_normerings={"havo": Norm(40, 0.5, CalculationMode.OFFICIAL)},
    )


@pytest.fixture
def composite_test(two_elements):
    """Composite test scored by the default weighted average."""
    return Test(
        id="t-comp",
        name="Werkstuk",
        test_type=TestType.COMPOSITE,
        default_norm=Norm(10, 1.0),
        elements=two_elements,
    )


@pytest.fixture
def scores_5_10():
    """Scores of 5/10 on A and 10/20 on B."""
    return [ElementScore("a", 5), ElementScore("b", 10)]
