"""
Adapters for the external diagnostic tools.

Each module runs one tool through the execution context and turns its text
output into typed values. Parsing lives in plain functions so captured tool
output can be tested directly.
"""
