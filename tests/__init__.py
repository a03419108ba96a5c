"""
Test suite for decimal-bigint

Contains:
- tests/unit/  : Unit tests for digit arithmetic, BigInt, contracts and cross-validation
- tests/data/  : Reference files (operand1, operand2, sum, difference, product)
"""
