"""
Tests package for the primality benchmark

- Unit tests: each algorithm and support module in isolation
- Integration tests: the full benchmark run and entry point
"""
