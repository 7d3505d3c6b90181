"""
Integration Tests for the Simulation Engine

Tests dispatch by country and operation type, optional sections, the
total investment and the narrative summary.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import pytest
from datetime import date
from decimal import Decimal

from modules.simulation import SimulationInput, run_simulation
from modules.simulation.summary import DISCLAIMER, format_eur, format_percent

AS_OF = date(2026, 1, 1)


class TestOperationDispatch:
    """Test which sections run for each operation type."""

    def test_purchase_france(self):
        result = run_simulation({
            "country": "france",
            "city": "Paris",
            "operationType": "achat",
            "purchasePrice": 300000,
        }, as_of=AS_OF)

        assert result.country == "france"
        assert result.country_label == "France"
        assert result.notary_fees is not None
        assert Decimal("5") < result.notary_fees.effective_rate < Decimal("12")
        assert result.capital_gain is None
        assert result.loan is None
        assert result.total_investment == Decimal("321215.25")

    def test_sale_france(self):
        result = run_simulation({
            "country": "france",
            "city": "Lyon",
            "operationType": "vente",
            "purchasePrice": 200000,
            "salePrice": 350000,
            "acquisitionDate": "2015-06-15",
        }, as_of=AS_OF)

        assert result.notary_fees is None
        assert result.capital_gain.gross_gain == Decimal("150000.00")
        assert result.capital_gain.holding_period_years > 5
        assert result.capital_gain.net_proceeds > 0
        assert result.total_investment is None

    def test_purchase_and_sale_with_loan(self):
        result = run_simulation({
            "country": "france",
            "city": "Nice",
            "operationType": "achat_vente",
            "purchasePrice": 300000,
            "salePrice": 400000,
            "acquisitionDate": "2010-01-01",
            "loanAmount": 250000,
            "loanRate": 3.0,
            "loanDuration": 20,
        }, as_of=AS_OF)

        assert result.notary_fees is not None
        assert result.capital_gain is not None
        assert result.loan is not None
        assert len(result.summary) >= 50
        assert len(result.disclaimer) >= 50
        assert result.total_investment == (
            Decimal("300000") + result.notary_fees.total + result.loan.total_interest
        )

    def test_belgium_purchase(self):
        result = run_simulation(SimulationInput(
            country="belgique",
            city="Bruxelles",
            operation_type="achat",
            purchase_price=350000,
        ), as_of=AS_OF)

        assert result.country_label == "Belgique"
        assert result.notary_fees.total == Decimal("49100.00")
        assert result.notary_fees.effective_rate == Decimal("14.03")

    def test_swiss_sale_uses_canton(self):
        result = run_simulation({
            "country": "suisse",
            "canton": "Vaud",
            "city": "Lausanne",
            "operationType": "vente",
            "purchasePrice": 400000,
            "salePrice": 600000,
            "acquisitionDate": "2018-01-01",
        }, as_of=AS_OF)

        assert result.capital_gain.gross_gain == Decimal("200000.00")
        assert result.capital_gain.total_tax == Decimal("14000.00")

    def test_luxembourg_sale(self):
        result = run_simulation({
            "country": "luxembourg",
            "city": "Luxembourg",
            "operationType": "vente",
            "purchasePrice": 400000,
            "salePrice": 550000,
            "acquisitionDate": "2020-03-01",
        }, as_of=AS_OF)

        assert result.capital_gain.gross_gain == Decimal("150000.00")
        assert result.capital_gain.total_tax > 0


class TestPartialResults:
    """Missing inputs leave sections out instead of raising."""

    def test_purchase_without_price(self):
        result = run_simulation({"country": "france", "city": "Paris", "operationType": "achat"}, as_of=AS_OF)

        assert result.notary_fees is None
        assert result.total_investment is None
        assert result.summary == "Simulation pour Paris, France."

    def test_sale_without_sale_price(self):
        result = run_simulation({
            "country": "france",
            "city": "Paris",
            "operationType": "vente",
            "purchasePrice": 200000,
        }, as_of=AS_OF)

        assert result.capital_gain is None
        assert result.notary_fees is None

    def test_zero_price_counts_as_missing(self):
        result = run_simulation({
            "country": "france",
            "city": "Paris",
            "operationType": "achat",
            "purchasePrice": 0,
        }, as_of=AS_OF)

        assert result.notary_fees is None

    def test_loan_runs_for_any_operation(self):
        result = run_simulation({
            "country": "allemagne",
            "city": "Berlin",
            "operationType": "vente",
            "loanAmount": 100000,
            "loanRate": 2.5,
            "loanDuration": 10,
        }, as_of=AS_OF)

        assert result.loan is not None
        assert result.capital_gain is None
        assert result.total_investment is None

    def test_incomplete_loan_terms_skip_loan(self):
        result = run_simulation({
            "country": "france",
            "city": "Paris",
            "operationType": "achat",
            "purchasePrice": 200000,
            "loanAmount": 100000,
            "loanRate": 2.5,
        }, as_of=AS_OF)

        assert result.loan is None

    @pytest.mark.parametrize("duration", [0, -5])
    def test_non_positive_duration_skips_loan(self, duration):
        result = run_simulation({
            "country": "france",
            "city": "Paris",
            "operationType": "achat",
            "purchasePrice": 200000,
            "loanAmount": 100000,
            "loanRate": 2.5,
            "loanDuration": duration,
        }, as_of=AS_OF)

        assert result.loan is None
        assert result.total_investment == result.notary_fees.total + Decimal("200000")

    def test_zero_rate_loan_is_computed(self):
        result = run_simulation({
            "country": "france",
            "city": "Paris",
            "operationType": "achat",
            "purchasePrice": 200000,
            "loanAmount": 120000,
            "loanRate": 0,
            "loanDuration": 10,
        }, as_of=AS_OF)

        assert result.loan.monthly_payment == Decimal("1000.00")
        assert result.loan.total_interest == Decimal("0.00")

    def test_unknown_country_skips_jurisdiction_sections(self):
        result = run_simulation({
            "country": "espagne",
            "city": "Madrid",
            "operationType": "achat_vente",
            "purchasePrice": 300000,
            "salePrice": 350000,
        }, as_of=AS_OF)

        assert result.country_label == "espagne"
        assert result.notary_fees is None
        assert result.capital_gain is None
        assert result.total_investment == Decimal("300000.00")
        assert result.summary.startswith("Simulation pour Madrid, espagne.")


class TestSummary:
    """Test the narrative text."""

    def test_sentence_order(self):
        result = run_simulation({
            "country": "france",
            "city": "Nice",
            "operationType": "achat_vente",
            "purchasePrice": 300000,
            "salePrice": 400000,
            "acquisitionDate": "2010-01-01",
            "loanAmount": 250000,
            "loanRate": 3.0,
            "loanDuration": 20,
        }, as_of=AS_OF)

        summary = result.summary
        positions = [
            summary.index("Simulation pour Nice, France."),
            summary.index("Les frais de notaire"),
            summary.index("L'impôt sur la plus-value"),
            summary.index("La mensualité du prêt"),
            summary.index("L'investissement total"),
        ]
        assert positions == sorted(positions)

    def test_notary_sentence_formats_amount_and_rate(self):
        result = run_simulation({
            "country": "france",
            "city": "Bordeaux",
            "operationType": "achat",
            "purchasePrice": 300000,
        }, as_of=AS_OF)

        assert format_eur(Decimal("21215.25")) in result.summary
        assert "7.07 %" in result.summary
        assert result.disclaimer == DISCLAIMER

    def test_no_tax_sentence(self):
        result = run_simulation({
            "country": "belgique",
            "city": "Liège",
            "operationType": "vente",
            "purchasePrice": 300000,
            "salePrice": 350000,
            "acquisitionDate": "2015-01-01",
        }, as_of=AS_OF)

        assert "Aucun impôt sur la plus-value n'est dû" in result.summary

    def test_format_eur(self):
        assert format_eur(Decimal("21215.25")) == "21\u202f215,25\u00a0€"
        assert format_eur(Decimal("-1500")) == "-1\u202f500,00\u00a0€"
        assert format_eur(Decimal("12.5")) == "12,50\u00a0€"

    def test_format_percent(self):
        assert format_percent(Decimal("14.03")) == "14.03 %"


class TestDeterminism:
    """Same input and as-of date, same output."""

    @pytest.fixture
    def simulation(self):
        return SimulationInput(
            country="suisse",
            canton="Genève",
            city="Genève",
            operation_type="achat_vente",
            purchase_price=800000,
            sale_price=950000,
            acquisition_date=date(2012, 5, 20),
            loan_amount=600000,
            loan_rate=2.1,
            loan_duration=25,
        )

    def test_same_input_same_output(self, simulation):
        first = run_simulation(simulation, as_of=AS_OF)
        second = run_simulation(simulation, as_of=AS_OF)

        assert first == second
        assert first.to_dict() == second.to_dict()
        assert first.fingerprint() == second.fingerprint()

    def test_dict_and_model_inputs_agree(self, simulation):
        from_model = run_simulation(simulation, as_of=AS_OF)
        from_dict = run_simulation(simulation.model_dump(by_alias=True), as_of=AS_OF)

        assert from_model.fingerprint() == from_dict.fingerprint()

    def test_as_of_changes_holding_period(self, simulation):
        early = run_simulation(simulation, as_of=date(2020, 1, 1))
        late = run_simulation(simulation, as_of=AS_OF)

        assert early.capital_gain.holding_period_years < late.capital_gain.holding_period_years

    def test_preview(self, simulation):
        result = run_simulation(simulation, as_of=AS_OF)
        preview = result.preview()

        assert preview["summary"] == result.summary
        assert preview["notary_fees_total"] == result.notary_fees.total
        assert preview["capital_gain_tax"] == result.capital_gain.total_tax
        assert preview["loan_monthly"] == result.loan.monthly_payment
        assert preview["total_investment"] == result.total_investment
