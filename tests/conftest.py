import pytest

from dnanalyzer.core.codon_table import build_codon_table


@pytest.fixture(scope="session")
def table():
    return build_codon_table()
