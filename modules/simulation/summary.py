"""
Narrative Summary

Builds the French text shown at the top of a report. One sentence per
computed section, always in the same order:

    location -> notary fees -> capital gain -> loan -> total investment

Amounts are written the way the fr-FR currency formatter prints euros
(narrow no-break space between thousands, decimal comma, "€" suffix).

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal
from typing import List, Optional

from core.money import Number, round2
from modules.simulation.models import (
    CapitalGainBreakdown,
    LoanBreakdown,
    NotaryFeesBreakdown,
)

THOUSANDS_SEPARATOR = "\u202f"  # narrow no-break space
CURRENCY_SEPARATOR = "\u00a0"  # no-break space

DISCLAIMER = (
    "Cette simulation est fournie à titre indicatif uniquement. Les résultats ne "
    "constituent pas un conseil fiscal, juridique ou financier. Les montants réels "
    "peuvent varier en fonction de votre situation personnelle, des évolutions "
    "législatives et des spécificités de votre dossier. Nous vous recommandons de "
    "consulter un notaire ou un conseiller fiscal agréé avant toute prise de décision."
)


def format_eur(amount: Number) -> str:
    """
    Format an amount as French euros.

    Example:
        >>> format_eur(Decimal("21215.25"))
        '21\u202f215,25\xa0€'
    """
    value = round2(amount)
    digits = f"{abs(value):,.2f}".replace(",", THOUSANDS_SEPARATOR).replace(".", ",")
    sign = "-" if value < 0 else ""
    return f"{sign}{digits}{CURRENCY_SEPARATOR}€"


def format_percent(value: Number) -> str:
    """Two decimals and a spaced percent sign, e.g. '7.07 %'."""
    return f"{round2(value):.2f} %"


def build_summary(
    city: str,
    country_label: str,
    notary_fees: Optional[NotaryFeesBreakdown] = None,
    capital_gain: Optional[CapitalGainBreakdown] = None,
    loan: Optional[LoanBreakdown] = None,
    total_investment: Optional[Decimal] = None
) -> str:
    """Join one sentence per present section with single spaces."""
    parts: List[str] = [f"Simulation pour {city}, {country_label}."]

    if notary_fees:
        parts.append(
            f"Les frais de notaire estimés s'élèvent à {format_eur(notary_fees.total)}, "
            f"soit un taux effectif de {format_percent(notary_fees.effective_rate)} "
            f"du prix d'acquisition."
        )

    if capital_gain:
        if capital_gain.total_tax > 0:
            parts.append(
                f"L'impôt sur la plus-value est estimé à {format_eur(capital_gain.total_tax)}. "
                f"Le produit net de cession serait de {format_eur(capital_gain.net_proceeds)}."
            )
        else:
            parts.append("Aucun impôt sur la plus-value n'est dû pour cette opération.")

    if loan:
        parts.append(
            f"La mensualité du prêt serait de {format_eur(loan.monthly_payment)} "
            f"pour un coût total du crédit de {format_eur(loan.total_cost)}."
        )

    if total_investment:
        parts.append(f"L'investissement total estimé s'élève à {format_eur(total_investment)}.")

    return " ".join(parts)
