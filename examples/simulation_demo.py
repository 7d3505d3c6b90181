"""
Simulation Engine - Usage Example

Demonstrates a purchase-and-resale simulation in France with a mortgage,
then the same purchase in each supported country.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from datetime import date

from modules.simulation import SimulationRequest, run_simulation
from modules.simulation.calculators import list_available_jurisdictions
from modules.simulation.report import breakdown_table, overview_rows
from modules.simulation.summary import format_eur


def main():
    """Demonstrate the simulation engine."""

    print("=" * 70)
    print("Real-Estate Simulation Engine - Demo")
    print("=" * 70)
    print()

    request = SimulationRequest(
        country="france",
        city="Nice",
        operation_type="achat_vente",
        purchase_price=300000,
        sale_price=400000,
        acquisition_date="2010-01-01",
        loan_amount=250000,
        loan_rate=3.0,
        loan_duration=20,
    )

    result = run_simulation(request.to_input(), as_of=date(2026, 1, 1))

    for label, value in overview_rows(result):
        print(f"{label:<20} {value}")
    print()

    print("=" * 70)
    print("BREAKDOWN")
    print("=" * 70)
    table = breakdown_table(result)
    for section, rows in table.groupby("section", sort=False):
        print(f"\n{section}:")
        for _, row in rows.iterrows():
            print(f"  {row['label']:<45} {row['value']:>14}")

    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(result.summary)
    print()
    print(f"Fingerprint: {result.fingerprint()}")

    print()
    print("=" * 70)
    print("SAME PURCHASE, EVERY COUNTRY (EUR 350,000)")
    print("=" * 70)
    for country in list_available_jurisdictions():
        fees = run_simulation(
            {"country": country, "city": "-", "operationType": "achat", "purchasePrice": 350000}
        ).notary_fees
        print(f"  {country:<12} {format_eur(fees.total):>16}  ({fees.effective_rate} %)")

    print()
    print("=" * 70)
    print(result.disclaimer)


if __name__ == "__main__":
    main()
