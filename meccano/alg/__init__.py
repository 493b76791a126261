"""Exact rational, surd and nested-radical arithmetic with 32-bit limits."""