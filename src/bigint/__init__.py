"""
Arbitrary-precision signed integers in base 10.

Digit arithmetic (src.bigint.math), the BigInt value type
(src.bigint.domain) and JSON Schema contracts (src.bigint.contracts).
"""
