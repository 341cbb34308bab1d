"""
CSV export of calculated investments.

Flattens each result to the columns of the downloadable summary sheet.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import List

from investcalc.core.calculations import total_contributed
from investcalc.models import InvestmentResult

logger = logging.getLogger(__name__)

CSV_HEADERS = ["Name", "Type", "Invested", "Returns", "Maturity"]
CSV_FILENAME = "investment_summary.csv"


def _money(value: float) -> str:
    return f"{value:.2f}"


def results_to_csv(results: List[InvestmentResult]) -> str:
    """Return the summary sheet as CSV text, header row first."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    for result in results:
        writer.writerow(
            [
                result.investment.name,
                result.investment.type,
                _money(total_contributed(result.investment)),
                _money(result.totalInterest),
                _money(result.maturityAmount),
            ]
        )

    logger.debug("Exported %d investment(s) to CSV", len(results))
    return output.getvalue()
