"""
Unit Tests for Report Tables

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import date

from modules.simulation import run_simulation
from modules.simulation.report import (
    SECTION_CAPITAL_GAIN,
    SECTION_LOAN,
    SECTION_NOTARY_FEES,
    SECTION_SYNTHESIS,
    TABLE_COLUMNS,
    breakdown_table,
    overview_rows,
)

AS_OF = date(2026, 1, 1)


def test_overview_rows():
    result = run_simulation({
        "country": "pays-bas",
        "city": "Amsterdam",
        "operationType": "achat_vente",
    }, as_of=AS_OF)

    assert overview_rows(result) == [
        ("Pays", "Pays-Bas"),
        ("Ville", "Amsterdam"),
        ("Type d'opération", "Achat et vente"),
    ]


def test_purchase_table():
    result = run_simulation({
        "country": "belgique",
        "city": "Bruxelles",
        "operationType": "achat",
        "purchasePrice": 350000,
    }, as_of=AS_OF)

    table = breakdown_table(result)

    assert list(table.columns) == TABLE_COLUMNS
    assert len(table) == 7
    assert list(table["section"].unique()) == [SECTION_NOTARY_FEES, SECTION_SYNTHESIS]
    total_row = table[table["label"] == "Total des frais de notaire"]
    assert total_row["value"].iloc[0] == result.notary_fees.total


def test_zero_capital_gain_lines_are_omitted():
    """An exempt Belgian sale lists no allowance and no tax lines."""
    result = run_simulation({
        "country": "belgique",
        "city": "Liège",
        "operationType": "vente",
        "purchasePrice": 300000,
        "salePrice": 350000,
        "acquisitionDate": "2015-01-01",
    }, as_of=AS_OF)

    table = breakdown_table(result)
    labels = list(table["label"])

    assert set(table["section"]) == {SECTION_CAPITAL_GAIN}
    assert "Impôt sur le revenu" not in labels
    assert "Abattement impôt sur le revenu (%)" not in labels
    assert "Base imposable (IR)" in labels
    assert labels[-2:] == ["Total impôt sur la plus-value", "Produit net de cession"]


def test_french_sale_lists_allowances_and_taxes():
    result = run_simulation({
        "country": "france",
        "city": "Lyon",
        "operationType": "vente",
        "purchasePrice": 200000,
        "salePrice": 350000,
        "acquisitionDate": "2015-06-15",
    }, as_of=AS_OF)

    labels = list(breakdown_table(result)["label"])

    for label in (
        "Abattement impôt sur le revenu (%)",
        "Abattement prélèvements sociaux (%)",
        "Impôt sur le revenu",
        "Prélèvements sociaux",
        "Surtaxe",
    ):
        assert label in labels


def test_full_table_section_order():
    result = run_simulation({
        "country": "allemagne",
        "city": "Berlin",
        "operationType": "achat_vente",
        "purchasePrice": 400000,
        "salePrice": 500000,
        "acquisitionDate": "2018-01-01",
        "loanAmount": 300000,
        "loanRate": 3.2,
        "loanDuration": 25,
    }, as_of=AS_OF)

    sections = list(breakdown_table(result)["section"].unique())

    assert sections == [SECTION_NOTARY_FEES, SECTION_CAPITAL_GAIN, SECTION_LOAN, SECTION_SYNTHESIS]


def test_empty_result_gives_empty_table():
    result = run_simulation({"country": "espagne", "city": "Madrid", "operationType": "vente"}, as_of=AS_OF)

    table = breakdown_table(result)

    assert table.empty
    assert list(table.columns) == TABLE_COLUMNS
