"""
Test suite for the clean code katas.

Demonstrates testing patterns for paired examples:
- Behavior of the corrected variant (not Pydantic validation itself)
- The observable defect of the anti-pattern variant
- Extension points (new variants without touching callers)
"""
