#!/usr/bin/env python3
"""
Group-by aggregation example - per-account invoice totals without float noise

Plain float sums drift (0.1 + 0.2 == 0.30000000000000004), which shows up as
cents that do not add up in reports. The .safe namespace rounds every
intermediate result to the scale its operands actually carry.
"""

import polars as pl
import polars_safe_float as sf


def main():
    print("Invoice aggregation example")
    print("=" * 50)

    invoices = pl.DataFrame({
        "account_id": ["alice", "bob", "alice", "charlie", "bob", "alice", "charlie"],
        "net": [0.1, 2.5, 0.2, 10.05, 1.2, 0.75, 3.3],
        "vat": ["20%", "20%", "20%", "7%", "20%", "20%", "7%"],
    })

    print("Raw invoice data:")
    print(invoices)

    # gross = net + vat% of net, row by row
    invoices = invoices.with_columns(
        gross=pl.col("net").safe.add(pl.col("vat")),
        gross_naive=pl.col("net") * (1 + pl.col("vat").str.strip_chars("%").cast(pl.Float64) / 100),
    )

    print("\nTotals per account:")
    totals = invoices.group_by("account_id").agg(
        pl.col("net").safe.sum().alias("net_total"),
        pl.col("gross").safe.sum().alias("gross_total"),
        pl.col("gross_naive").sum().alias("gross_total_naive"),
        pl.col("gross").safe.mean(2).alias("gross_mean"),
        pl.len().alias("invoices"),
    ).sort("account_id")

    sf.print_safe_float_dataframe(totals)

    for row in totals.iter_rows(named=True):
        print(f"{row['account_id']:8s}: {sf.to_plain_string(row['gross_total'])} "
              f"(naive {row['gross_total_naive']!r}, {row['invoices']} invoices)")


if __name__ == "__main__":
    main()
