"""
Report Tables

Flattens a SimulationResult into the tables a report renderer lays out:
- overview_rows(): country, city, operation
- breakdown_table(): one row per figure, grouped by section

Values stay raw (Decimal / int); formatting is up to the renderer. Rows
follow the report conventions: capital-gain allowances, bases and tax
lines are only listed when they are non-zero.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import List, Dict, Any, Tuple

import pandas as pd

from modules.simulation.models import OPERATION_LABELS, SimulationResult
from utils.logging_config import setup_logger, log_table_info

logger = setup_logger(__name__)

TABLE_COLUMNS = ["section", "label", "value"]

SECTION_NOTARY_FEES = "Frais de notaire"
SECTION_CAPITAL_GAIN = "Plus-value"
SECTION_LOAN = "Prêt immobilier"
SECTION_SYNTHESIS = "Synthèse"


def overview_rows(result: SimulationResult) -> List[Tuple[str, str]]:
    """Cover-page information lines."""
    return [
        ("Pays", result.country_label),
        ("Ville", result.city),
        ("Type d'opération", OPERATION_LABELS.get(result.operation_type, result.operation_type)),
    ]


def _notary_fee_rows(result: SimulationResult) -> List[Dict[str, Any]]:
    nf = result.notary_fees
    rows = [
        ("Droits de mutation / d'enregistrement", nf.registration_tax),
        ("Émoluments du notaire", nf.notary_emoluments),
        ("Débours et frais administratifs", nf.disbursements),
        ("Frais divers", nf.misc_fees),
        ("Total des frais de notaire", nf.total),
        ("Taux effectif (%)", nf.effective_rate),
    ]
    return [{"section": SECTION_NOTARY_FEES, "label": label, "value": value} for label, value in rows]


def _capital_gain_rows(result: SimulationResult) -> List[Dict[str, Any]]:
    cg = result.capital_gain
    rows: List[Tuple[str, Any]] = [
        ("Plus-value brute", cg.gross_gain),
        ("Charges déductibles", cg.deductible_expenses),
        ("Plus-value nette", cg.net_gain),
        ("Durée de détention (ans)", cg.holding_period_years),
    ]

    optional_rows = [
        ("Abattement impôt sur le revenu (%)", cg.income_tax_allowance_percent),
        ("Abattement prélèvements sociaux (%)", cg.social_tax_allowance_percent),
        ("Base imposable (IR)", cg.taxable_gain_income_tax),
        ("Impôt sur le revenu", cg.income_tax),
        ("Prélèvements sociaux", cg.social_tax),
        ("Surtaxe", cg.surtax),
    ]
    rows.extend((label, value) for label, value in optional_rows if value > 0)

    rows.append(("Total impôt sur la plus-value", cg.total_tax))
    rows.append(("Produit net de cession", cg.net_proceeds))

    return [{"section": SECTION_CAPITAL_GAIN, "label": label, "value": value} for label, value in rows]


def _loan_rows(result: SimulationResult) -> List[Dict[str, Any]]:
    ln = result.loan
    rows = [
        ("Mensualité", ln.monthly_payment),
        ("Total des intérêts", ln.total_interest),
        ("Montant total remboursé", ln.total_repaid),
        ("Coût total du crédit", ln.total_cost),
    ]
    return [{"section": SECTION_LOAN, "label": label, "value": value} for label, value in rows]


def breakdown_table(result: SimulationResult) -> pd.DataFrame:
    """
    Build the figure table of a report.

    Args:
        result: Simulation result

    Returns:
        DataFrame with columns section, label, value; sections that were
        not computed contribute no rows
    """
    rows: List[Dict[str, Any]] = []

    if result.notary_fees:
        rows.extend(_notary_fee_rows(result))
    if result.capital_gain:
        rows.extend(_capital_gain_rows(result))
    if result.loan:
        rows.extend(_loan_rows(result))
    if result.total_investment:
        rows.append({
            "section": SECTION_SYNTHESIS,
            "label": "Investissement total estimé",
            "value": result.total_investment,
        })

    df = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    log_table_info(logger, df, name=f"Breakdown table ({result.country})")
    return df
